"""
Use-case: sync every tagged secret from the secret store into the cluster.

Business decisions owned here:
  - Run flow: discover → (per secret) extract → fetch → transform → (per namespace) apply.
  - Failure isolation: only discovery may abort a run. Any other SyncError is
    recorded against its secret or (secret, namespace) pair and the loop moves on.

Depends only on Domain ports, entities and application services.
"""

import logging

from src.application.services.payload_transformer import parse_payload, transform_payload
from src.application.services.tag_extractor import extract_tags
from src.domain.entities.secret import (
    ApplyOutcome,
    DestinationRecord,
    RunConfig,
    SecretDescriptor,
    SecretOutcome,
    SyncReport,
)
from src.domain.errors import SyncError
from src.domain.ports.secret_applier_port import ISecretApplier
from src.domain.ports.secret_store_port import ISecretStore

logger = logging.getLogger(__name__)


class SyncSecretsUseCase:
    def __init__(self, store: ISecretStore, applier: ISecretApplier) -> None:
        """
        Args:
            store:   ISecretStore implementation (e.g. SecretsManagerAdapter).
            applier: ISecretApplier implementation (e.g. KubernetesSecretApplier).
        """
        self._store = store
        self._applier = applier

    def execute(self, config: RunConfig) -> SyncReport:
        """Run one full sync pass.

        Returns:
            A SyncReport with one SecretOutcome per discovered secret.

        Raises:
            DiscoveryFailure: if the store cannot list tagged secrets.
        """
        descriptors = self.discover(config)
        report = SyncReport()
        for descriptor in descriptors:
            report.outcomes.append(self.process_secret(descriptor, config))
        log_report(report)
        return report

    def discover(self, config: RunConfig) -> list[SecretDescriptor]:
        descriptors = self._store.list_tagged_secrets(config.namespace_tag)
        logger.debug("Number of secrets retrieved: %d", len(descriptors))
        return descriptors

    def process_secret(self, descriptor: SecretDescriptor, config: RunConfig) -> SecretOutcome:
        logger.info("AWS Secret Name: %s", descriptor.name)
        outcome = SecretOutcome(secret=descriptor.name)
        try:
            record = self.build_record(descriptor, config)
        except SyncError as exc:
            logger.error("Skipping secret %s: %s", descriptor.name, exc)
            outcome.error = exc
            return outcome

        for namespace in record.namespaces:
            outcome.applies.append(self.apply_record(record, namespace))
        return outcome

    def build_record(self, descriptor: SecretDescriptor, config: RunConfig) -> DestinationRecord:
        tags = extract_tags(descriptor, config)
        payload = parse_payload(self._store.get_secret_value(descriptor.identifier))
        return DestinationRecord(
            name=tags.secret_name,
            namespaces=tuple(tags.namespaces),
            data=transform_payload(payload, tags.filename),
        )

    def apply_record(self, record: DestinationRecord, namespace: str) -> ApplyOutcome:
        outcome = ApplyOutcome(namespace=namespace, name=record.name)
        try:
            self._applier.apply_secret(namespace, record.name, record.data)
        except SyncError as exc:
            logger.error("Error updating secret: %s", exc)
            outcome.error = exc
        else:
            logger.info("Secret %s/%s updated", namespace, record.name)
        return outcome


def log_report(report: SyncReport) -> None:
    level = logging.WARNING if report.secrets_failed else logging.INFO
    logger.log(
        level,
        "Sync finished: %d/%d secrets ok, %d/%d applies ok",
        report.secrets_total - report.secrets_failed,
        report.secrets_total,
        report.applies_total - report.applies_failed,
        report.applies_total,
    )
