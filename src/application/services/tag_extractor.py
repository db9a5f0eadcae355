"""
Application service: derive routing metadata from a secret's tags.

A source secret is routed entirely by its tags:
  - secret_name_tag: name of the destination Kubernetes secret (required).
  - namespace_tag:   space-separated destination namespaces (required).
  - filename_tag:    when present, the payload is written as a single file.

When several tags share a key, the first one in the store's tag order wins.
"""

from dataclasses import dataclass
from typing import Optional

from src.domain.entities.secret import RunConfig, SecretDescriptor, Tag
from src.domain.errors import MissingTag

NAMESPACE_SEPARATOR = " "


@dataclass(frozen=True)
class ExtractedTags:
    secret_name: str
    namespaces: list[str]
    filename: Optional[str]


def find_tag(descriptor: SecretDescriptor, key: str) -> Optional[Tag]:
    return next((tag for tag in descriptor.tags if tag.key == key), None)


def get_secret_name(descriptor: SecretDescriptor, secret_name_tag: str) -> str:
    tag = find_tag(descriptor, secret_name_tag)
    if tag is None:
        raise MissingTag(secret_name_tag, descriptor.name)
    return tag.value


def get_namespaces(descriptor: SecretDescriptor, namespace_tag: str) -> list[str]:
    """Split the namespace tag on single spaces.

    Consecutive spaces produce empty tokens, which are kept as-is:
    ``"a  b"`` yields ``["a", "", "b"]``.
    """
    tag = find_tag(descriptor, namespace_tag)
    if tag is None:
        raise MissingTag(namespace_tag, descriptor.name)
    return tag.value.split(NAMESPACE_SEPARATOR)


def get_filename(descriptor: SecretDescriptor, filename_tag: str) -> Optional[str]:
    tag = find_tag(descriptor, filename_tag)
    return tag.value if tag is not None else None


def extract_tags(descriptor: SecretDescriptor, config: RunConfig) -> ExtractedTags:
    """Extract destination name, namespaces and optional filename.

    Raises:
        MissingTag: if the secret-name or namespace tag is absent.
    """
    return ExtractedTags(
        secret_name=get_secret_name(descriptor, config.secret_name_tag),
        namespaces=get_namespaces(descriptor, config.namespace_tag),
        filename=get_filename(descriptor, config.filename_tag),
    )
