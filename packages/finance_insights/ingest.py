"""Host-side acquisition of statement files.

The pipeline consumes decoded text only; this module is the piece of the
host that turns a path on disk into that text, applying the same upload
checks the web form enforced (``.csv`` extension, size limit).
"""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

from .logging_setup import get_logger

DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024

_logger = get_logger("finance_insights.ingest")


class StatementFileError(ValueError):
    """The file cannot be accepted as a statement upload."""


def max_upload_bytes() -> int:
    """Resolve the upload limit from ``FI_MAX_UPLOAD_BYTES`` (default 5 MiB)."""

    raw = os.getenv("FI_MAX_UPLOAD_BYTES")
    try:
        value = int(raw) if raw else None
    except ValueError:
        value = None
    if value is not None and value > 0:
        return value
    return DEFAULT_MAX_UPLOAD_BYTES


def decode_bytes(data: bytes) -> str:
    """Decode upload bytes as UTF-8 (BOM tolerated), falling back to Windows-1252.

    Raises ``StatementFileError`` for content that is not text in either
    encoding: NUL bytes (UTF-16 or binary files) or bytes Windows-1252 leaves
    undefined.
    """

    if b"\x00" in data:
        raise StatementFileError("could not decode file content (NUL byte found)")
    for encoding in ("utf-8-sig", "cp1252"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise StatementFileError("could not decode file content")


def load_statement_text(path: str | PathLike[str]) -> str:
    """Read a CSV statement from ``path`` and return its decoded text.

    Raises ``StatementFileError`` for a non-``.csv`` name or an oversized
    file; ``FileNotFoundError``/``PermissionError`` propagate unchanged.
    """

    p = Path(path)
    if p.suffix.lower() != ".csv":
        raise StatementFileError(f"not a CSV file (.csv expected): {p.name}")

    limit = max_upload_bytes()
    size = p.stat().st_size
    if size > limit:
        raise StatementFileError(f"file is too large: {size} bytes (limit {limit})")

    text = decode_bytes(p.read_bytes())
    _logger.debug("loaded %s (%d bytes)", p, size)
    return text


__all__ = [
    "DEFAULT_MAX_UPLOAD_BYTES",
    "StatementFileError",
    "decode_bytes",
    "load_statement_text",
    "max_upload_bytes",
]
