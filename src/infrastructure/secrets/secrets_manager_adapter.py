"""
Infrastructure adapter: AWS Secrets Manager → ISecretStore.

Discovery pushes the tag-key filter down to ListSecrets and follows every page.
botocore errors are translated into domain errors at this boundary so the
application layer never imports boto3.
"""

import os
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.domain.entities.secret import SecretDescriptor, Tag
from src.domain.errors import DiscoveryFailure, FetchFailure, MalformedPayload
from src.domain.ports.secret_store_port import ISecretStore


class SecretsManagerAdapter(ISecretStore):
    """Lists and reads secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None, client: Any | None = None) -> None:
        self._client = client or boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )

    def list_tagged_secrets(self, tag_key: str) -> list[SecretDescriptor]:
        paginator = self._client.get_paginator("list_secrets")
        try:
            entries = [
                entry
                for page in paginator.paginate(
                    Filters=[{"Key": "tag-key", "Values": [tag_key]}]
                )
                for entry in page.get("SecretList", [])
            ]
        except (BotoCoreError, ClientError) as exc:
            raise DiscoveryFailure(f"Listing secrets tagged {tag_key!r} failed: {exc}") from exc
        return [_to_descriptor(entry) for entry in entries]

    def get_secret_value(self, identifier: str) -> str:
        try:
            response = self._client.get_secret_value(SecretId=identifier)
        except (BotoCoreError, ClientError) as exc:
            raise FetchFailure(f"Reading secret {identifier!r} failed: {exc}") from exc
        if "SecretString" not in response:
            raise MalformedPayload(f"Secret {identifier!r} has no string value")
        return response["SecretString"]


def _to_descriptor(entry: dict) -> SecretDescriptor:
    return SecretDescriptor(
        identifier=entry["ARN"],
        name=entry.get("Name", entry["ARN"]),
        tags=tuple(
            Tag(key=tag["Key"], value=tag.get("Value", ""))
            for tag in entry.get("Tags", [])
        ),
    )
