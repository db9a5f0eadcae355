"""
Application service: turn a secret payload into Kubernetes Secret data.

Two shapes are produced, depending on the filename tag:
  - file-secret mode: every field is rendered as a ``key=value`` line and the
    whole text is stored base64 encoded under a single filename key.
  - field-map mode:   every field is base64 encoded on its own and keeps its key.

Lines in file-secret mode follow the field order of the source JSON document.
"""

import base64
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from src.domain.errors import MalformedPayload

_PAYLOAD_ADAPTER = TypeAdapter(dict[str, str])


def parse_payload(raw: str) -> dict[str, str]:
    """Parse a raw secret string as a JSON object of string fields.

    Raises:
        MalformedPayload: if *raw* is not valid JSON or not an object of strings.
    """
    try:
        return _PAYLOAD_ADAPTER.validate_json(raw, strict=True)
    except ValidationError as exc:
        raise MalformedPayload(
            f"Secret value is not a JSON object of string fields: {exc.error_count()} error(s)"
        ) from exc


def encode_value(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def create_file_secret(payload: dict[str, str], filename: str) -> dict[str, str]:
    blob = "".join(f"{key}={value}\n" for key, value in payload.items())
    return {filename: encode_value(blob)}


def create_data_map(payload: dict[str, str]) -> dict[str, str]:
    return {key: encode_value(value) for key, value in payload.items()}


def transform_payload(payload: dict[str, str], filename: Optional[str]) -> dict[str, str]:
    if filename is not None:
        return create_file_secret(payload, filename)
    return create_data_map(payload)
