"""Builders shared across test modules."""
from src.domain.entities.secret import SecretDescriptor, Tag

NAMESPACE_TAG = "/k8s/namespace"
SECRET_NAME_TAG = "/k8s/secret-name"
FILENAME_TAG = "/k8s/filename"

_SHORT_KEYS = {
    "namespace": NAMESPACE_TAG,
    "secret_name": SECRET_NAME_TAG,
    "filename": FILENAME_TAG,
}


def make_descriptor(name: str = "app/db", **tags: str) -> SecretDescriptor:
    """Build a descriptor; keyword tags use the short names namespace/secret_name/filename."""
    return SecretDescriptor(
        identifier=f"arn:aws:secretsmanager:us-east-1:123456789012:secret:{name}",
        name=name,
        tags=tuple(
            Tag(key=_SHORT_KEYS.get(key, key), value=value) for key, value in tags.items()
        ),
    )
