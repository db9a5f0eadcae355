"""
Port (interface) for secret stores.
Infrastructure adapters (e.g. SecretsManagerAdapter) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.secret import SecretDescriptor


class ISecretStore(ABC):
    @abstractmethod
    def list_tagged_secrets(self, tag_key: str) -> list[SecretDescriptor]:
        """List every secret carrying a tag with key *tag_key*.

        Raises:
            DiscoveryFailure: on transport or authorization errors.
        """
        ...

    @abstractmethod
    def get_secret_value(self, identifier: str) -> str:
        """Return the raw string payload of the secret *identifier*.

        Raises:
            FetchFailure: if the value cannot be read.
            MalformedPayload: if the secret has no string payload.
        """
        ...
