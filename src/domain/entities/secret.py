"""
Domain entities for the secret synchronization pipeline.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.domain.errors import SyncError


@dataclass(frozen=True)
class Tag:
    key: str
    value: str


@dataclass(frozen=True)
class SecretDescriptor:
    """A store-side listing entry: identifier and tags, never the value."""

    identifier: str
    name: str
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True)
class RunConfig:
    """Tag keys that route a source secret; constant for a whole run."""

    namespace_tag: str
    secret_name_tag: str
    filename_tag: str


@dataclass(frozen=True)
class DestinationRecord:
    name: str
    namespaces: tuple[str, ...]
    data: dict[str, str]


@dataclass
class ApplyOutcome:
    namespace: str
    name: str
    error: Optional[SyncError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SecretOutcome:
    secret: str
    error: Optional[SyncError] = None
    applies: list[ApplyOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and all(apply.ok for apply in self.applies)


@dataclass
class SyncReport:
    outcomes: list[SecretOutcome] = field(default_factory=list)

    @property
    def secrets_total(self) -> int:
        return len(self.outcomes)

    @property
    def secrets_failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.ok)

    @property
    def applies_total(self) -> int:
        return sum(len(outcome.applies) for outcome in self.outcomes)

    @property
    def applies_failed(self) -> int:
        return sum(
            1 for outcome in self.outcomes for apply in outcome.applies if not apply.ok
        )
