"""
Port (interface) for the destination cluster.
Infrastructure adapters (e.g. KubernetesSecretApplier) must implement this interface.
"""

from abc import ABC, abstractmethod


class ISecretApplier(ABC):
    @abstractmethod
    def apply_secret(self, namespace: str, name: str, data: dict[str, str]) -> None:
        """Create or update the secret *name* in *namespace* by server-side apply.

        *data* values must already be base64 encoded.

        Raises:
            ApplyFailure: if the cluster rejects or cannot receive the apply.
        """
        ...
