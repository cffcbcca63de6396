"""Delimited-text parser for bank statement exports.

The parser is deliberately naive: it splits each line on the detected
delimiter and strips double quotes afterwards. Delimiters embedded inside
quoted fields are *not* honored, so a description such as ``"Pao, leite"``
in a comma-delimited file shifts the remaining fields of that row. Exports
from the supported banks do not quote their fields, and the row-level
tolerance of the Normalizer absorbs the occasional misaligned line.
"""

from __future__ import annotations

from .models import RawRow

_BOM = "\ufeff"


def _clean_field(value: str) -> str:
    return value.strip().replace('"', "")


def _split_lines(text: str) -> list[str]:
    return text.lstrip(_BOM).strip().split("\n")


def detect_delimiter(header_line: str) -> str:
    """Return ``";"`` when the header line contains one, else ``","``."""

    return ";" if ";" in header_line else ","


def parse_csv(text: str) -> list[RawRow]:
    """Split CSV ``text`` into one header-keyed mapping per data line.

    Returns an empty list when the stripped text has fewer than two lines
    (no header plus data). Rows with extra fields drop them; rows with fewer
    fields map the missing headers to ``""``.
    """

    lines = _split_lines(text)
    if len(lines) < 2:
        return []

    delimiter = detect_delimiter(lines[0])
    headers = [_clean_field(h) for h in lines[0].split(delimiter)]

    rows: list[RawRow] = []
    for line in lines[1:]:
        values = line.split(delimiter)
        row: RawRow = {}
        for index, header in enumerate(headers):
            row[header] = _clean_field(values[index]) if index < len(values) else ""
        rows.append(row)
    return rows


def preview_csv(text: str, *, limit: int = 5) -> list[list[str]]:
    """Return the header row followed by up to ``limit`` split data rows.

    Raises ``ValueError`` when the content has no data line.
    """

    lines = _split_lines(text)
    if len(lines) < 2:
        raise ValueError(
            "O arquivo CSV precisa ter pelo menos um cabeçalho e uma linha de dados."
        )
    delimiter = detect_delimiter(lines[0])
    return [[_clean_field(v) for v in line.split(delimiter)] for line in lines[: limit + 1]]


__all__ = ["detect_delimiter", "parse_csv", "preview_csv"]
