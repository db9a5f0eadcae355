"""
Domain error taxonomy for a sync run.

DiscoveryFailure is the only run-fatal error. Every other SyncError is scoped
to one secret or one (secret, namespace) pair and is recorded, not re-raised.
Infrastructure adapters translate library exceptions into these types.
"""


class SyncError(Exception):
    """Base class for every error raised by the sync pipeline."""


class DiscoveryFailure(SyncError):
    """Listing tagged secrets failed; nothing can be synced this run."""


class FetchFailure(SyncError):
    """The value of one secret could not be read from the store."""


class MissingTag(SyncError):
    def __init__(self, tag_key: str, secret: str) -> None:
        super().__init__(f"Secret {secret!r} has no tag with key {tag_key!r}")
        self.tag_key = tag_key
        self.secret = secret


class MalformedPayload(SyncError):
    """The secret value is not a JSON object of string fields."""


class ApplyFailure(SyncError):
    def __init__(self, namespace: str, name: str, reason: str) -> None:
        super().__init__(f"Failed to apply secret {namespace}/{name}: {reason}")
        self.namespace = namespace
        self.name = name
