from pathlib import Path

import pytest

from finance_insights.ingest import (
    DEFAULT_MAX_UPLOAD_BYTES,
    StatementFileError,
    decode_bytes,
    load_statement_text,
    max_upload_bytes,
)


def test_loads_utf8_csv(tmp_path: Path):
    path = tmp_path / "extrato.csv"
    path.write_text("Data;Descrição;Valor\n01/03/2025;Uber;-20,00\n", encoding="utf-8")
    assert load_statement_text(path).startswith("Data;Descrição;Valor")


def test_extension_is_case_insensitive(tmp_path: Path):
    path = tmp_path / "EXTRATO.CSV"
    path.write_text("a,b,c\n1,2,3\n", encoding="utf-8")
    assert load_statement_text(str(path)) == "a,b,c\n1,2,3\n"


def test_rejects_non_csv_extension(tmp_path: Path):
    path = tmp_path / "extrato.txt"
    path.write_text("a,b,c\n1,2,3\n", encoding="utf-8")
    with pytest.raises(StatementFileError, match="CSV"):
        load_statement_text(path)


def test_rejects_file_over_limit(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FI_MAX_UPLOAD_BYTES", "10")
    path = tmp_path / "big.csv"
    path.write_text("Data,Descricao,Valor\n", encoding="utf-8")
    with pytest.raises(StatementFileError, match="too large"):
        load_statement_text(path)


def test_missing_file_propagates(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_statement_text(tmp_path / "nope.csv")


@pytest.mark.parametrize("raw", [None, "", "abc", "-1", "0"])
def test_max_upload_bytes_falls_back_to_default(raw, monkeypatch: pytest.MonkeyPatch):
    if raw is not None:
        monkeypatch.setenv("FI_MAX_UPLOAD_BYTES", raw)
    assert max_upload_bytes() == DEFAULT_MAX_UPLOAD_BYTES == 5 * 1024 * 1024


def test_decode_strips_utf8_bom():
    assert decode_bytes("\ufeffData".encode()) == "Data"


def test_decode_falls_back_to_cp1252():
    assert decode_bytes("Descrição".encode("latin-1")) == "Descrição"
    assert decode_bytes(b"Pre\x80o") == "Pre€o"


def test_decode_rejects_utf16_content():
    with pytest.raises(StatementFileError, match="NUL"):
        decode_bytes("Data,Valor".encode("utf-16"))


def test_decode_rejects_bytes_undefined_in_cp1252():
    # 0x81 is invalid UTF-8 on its own and unassigned in Windows-1252.
    with pytest.raises(StatementFileError, match="could not decode"):
        decode_bytes(b"Data,Valor\n\x81")


def test_load_reports_undecodable_file(tmp_path: Path):
    path = tmp_path / "binario.csv"
    path.write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")
    with pytest.raises(StatementFileError):
        load_statement_text(path)
