"""
CLI entry point: one sync run, intended to be scheduled as a Kubernetes CronJob.

This module is the Composition Root for the sync use-case: it parses the tag
keys, configures logging, builds the AWS and Kubernetes clients once, and
runs SyncSecretsUseCase.

Run locally:

    export AWS_PROFILE=<your-profile>
    export AWS_DEFAULT_REGION=us-east-1
    python -m src.infrastructure.entrypoints.cli \\
        --namespace-tag /k8s/namespace \\
        --secret-name-tag /k8s/secret-name \\
        --filename-tag /k8s/filename

Exit codes:
    0 - Run completed (individual secrets or namespaces may still have failed)
    1 - Discovery failed or a client could not be constructed
    2 - Usage error
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from src.application.use_cases.sync_secrets import SyncSecretsUseCase
from src.domain.entities.secret import RunConfig
from src.domain.errors import DiscoveryFailure

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def _tag_option(parser: argparse.ArgumentParser, short: str, long: str, env: str, description: str) -> None:
    default = os.environ.get(env)
    parser.add_argument(
        short,
        long,
        default=default,
        required=default is None,
        help=f"{description} (env: {env})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="k8s-aws-secrets-sync",
        description="Copy tagged AWS Secrets Manager secrets into Kubernetes Secrets.",
    )
    _tag_option(
        parser, "-n", "--namespace-tag", "NAMESPACE_TAG",
        "The key of the tag holding the space-separated target namespaces",
    )
    _tag_option(
        parser, "-s", "--secret-name-tag", "SECRET_NAME_TAG",
        "The key of the tag holding the Kubernetes secret name",
    )
    _tag_option(
        parser, "-f", "--filename-tag", "FILENAME_TAG",
        "The key of the tag holding the filename for file secrets",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="[%(levelname)s %(name)s] %(message)s",
        stream=sys.stderr,
    )


def build_use_case() -> SyncSecretsUseCase:
    from src.infrastructure.kubernetes.secret_applier import KubernetesSecretApplier
    from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter

    return SyncSecretsUseCase(store=SecretsManagerAdapter(), applier=KubernetesSecretApplier())


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging()

    run_config = RunConfig(
        namespace_tag=args.namespace_tag,
        secret_name_tag=args.secret_name_tag,
        filename_tag=args.filename_tag,
    )

    try:
        use_case = build_use_case()
    except Exception as exc:
        logger.error("Could not initialise clients: %s", exc)
        return 1

    try:
        use_case.execute(run_config)
    except DiscoveryFailure as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
