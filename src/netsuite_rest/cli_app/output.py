"""JSON output for CLI commands."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from pydantic import BaseModel


def to_jsonable(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True)
    if isinstance(payload, list):
        return [to_jsonable(item) for item in payload]
    if isinstance(payload, dict):
        return {key: to_jsonable(value) for key, value in payload.items()}
    return payload


def emit(payload: Any, stream: TextIO | None = None) -> None:
    """Write a payload to stdout as indented JSON."""
    stream = stream or sys.stdout
    json.dump(to_jsonable(payload), stream, indent=2, ensure_ascii=False, default=str)
    stream.write("\n")
