"""
Infrastructure adapter: Kubernetes CoreV1Api → ISecretApplier.

Secrets are written with server-side apply under a fixed field manager, so
repeated runs converge on the same object and fields owned by other managers
are left alone. Cluster credentials come from the in-cluster service account
when available, otherwise from the local kubeconfig.
"""

import logging
from typing import Optional

from kubernetes import client, config
from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from src.domain.errors import ApplyFailure
from src.domain.ports.secret_applier_port import ISecretApplier

logger = logging.getLogger(__name__)

FIELD_MANAGER = "aws-secrets-sync"
APPLY_PATCH_CONTENT_TYPE = "application/apply-patch+yaml"


def load_cluster_config() -> None:
    try:
        config.load_incluster_config()
    except config.ConfigException:
        config.load_kube_config()


def build_secret_manifest(namespace: str, name: str, data: dict[str, str]) -> dict:
    return {
        "apiVersion": "v1",
        "kind": "Secret",
        "metadata": {"name": name, "namespace": namespace},
        "data": data,
    }


class KubernetesSecretApplier(ISecretApplier):
    """Applies Secret manifests with the official kubernetes client."""

    def __init__(
        self,
        api: Optional[client.CoreV1Api] = None,
        field_manager: str = FIELD_MANAGER,
    ) -> None:
        """
        Args:
            api:           Pre-built CoreV1Api. When omitted the cluster config is
                           loaded and a new CoreV1Api is created.
            field_manager: Field manager identity that owns the applied fields.
        """
        if api is None:
            load_cluster_config()
            api = client.CoreV1Api()
        self._api = api
        self._field_manager = field_manager

    def apply_secret(self, namespace: str, name: str, data: dict[str, str]) -> None:
        manifest = build_secret_manifest(namespace, name, data)
        logger.debug("patch: %s/%s keys=%s", namespace, name, sorted(data))
        try:
            self._api.patch_namespaced_secret(
                name=name,
                namespace=namespace,
                body=manifest,
                field_manager=self._field_manager,
                _content_type=APPLY_PATCH_CONTENT_TYPE,
            )
        except ApiException as exc:
            raise ApplyFailure(namespace, name, f"{exc.status} {exc.reason}") from exc
        except HTTPError as exc:
            raise ApplyFailure(namespace, name, str(exc)) from exc
