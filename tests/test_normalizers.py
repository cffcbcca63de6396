from datetime import date

import pytest

from finance_insights import SAMPLE_CSV, normalize_rows, parse_amount, parse_csv, parse_date
from finance_insights.normalizers import resolve_columns


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("-1.234,56", -1234.56),
        ("-35.90", -35.90),
        ("5500.00", 5500.0),
        ("1.000.000,00", 1_000_000.0),
        ("0,5", 0.5),
        ("+12", 12.0),
        ("  -7 ", -7.0),
    ],
)
def test_parse_amount_locale_rules(raw, expected):
    assert parse_amount(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["abc", "R$ 10,00", "1,2,3", "inf", "nan", "1_000", "-", ""])
def test_parse_amount_rejects_non_numeric(raw):
    assert parse_amount(raw) is None


@pytest.mark.parametrize("raw", ["25/03/2025", "2025-03-25", "2025/03/25", "25/3/2025"])
def test_parse_date_disambiguation(raw):
    assert parse_date(raw) == date(2025, 3, 25)


@pytest.mark.parametrize(
    "raw",
    ["31/02/2025", "2025-13-01", "hoje", "03/2025", "25/03/25", "20250325", "2025-W13-2", "2025-084"],
)
def test_parse_date_rejects_invalid(raw):
    assert parse_date(raw) is None


@pytest.mark.parametrize("raw", ["2025-3-25", "2025-03-25T10:30:00", "2025-03-25 08:00"])
def test_parse_date_accepts_hyphenated_variants(raw):
    assert parse_date(raw) == date(2025, 3, 25)


def test_resolve_columns_matches_known_headers_case_insensitively():
    cols = resolve_columns(["Valor", "DATA", "Histórico", "Descrição do lançamento", "Categoria"])
    assert cols.date == "DATA"
    assert cols.description == "Descrição do lançamento"
    assert cols.amount == "Valor"
    assert cols.category == "Categoria"


def test_resolve_columns_falls_back_to_positions():
    cols = resolve_columns(["when", "what", "how much"])
    assert (cols.date, cols.description, cols.amount, cols.category) == (
        "when",
        "what",
        "how much",
        None,
    )


def test_resolve_columns_with_too_few_headers():
    cols = resolve_columns(["only"])
    assert cols.date == "only"
    assert cols.description is None
    assert cols.amount is None


def test_sample_normalizes_to_34_transactions_with_expected_categories():
    txs = normalize_rows(parse_csv(SAMPLE_CSV))
    assert len(txs) == 34
    by_desc = {tx.description: tx.category for tx in txs}
    assert by_desc["Salario"] == "Renda"
    assert by_desc["Supermercado Extra"] == "Alimentação"
    assert by_desc["99 Taxi"] == "Transporte"
    assert by_desc["Gasolina"] == "Transporte"
    assert by_desc["Conta de Luz"] == "Contas"
    assert by_desc["Plano de Saude"] == "Saúde"
    assert by_desc["Escola Ingles"] == "Educação"
    assert by_desc["Viagem Praia"] == "Lazer"
    assert by_desc["Condominio"] == "Moradia"
    assert by_desc["Pix Recebido"] == "Renda"


def test_kind_always_matches_amount_sign():
    txs = normalize_rows(parse_csv(SAMPLE_CSV))
    assert all((tx.amount >= 0) == (tx.kind == "income") for tx in txs)


def test_normalization_is_deterministic():
    assert normalize_rows(parse_csv(SAMPLE_CSV)) == normalize_rows(parse_csv(SAMPLE_CSV))


def test_invalid_rows_are_dropped_silently():
    text = "\n".join(
        [
            "Data;Descrição;Valor",
            "01/03/2025;Mercado;-10,00",
            ";Sem data;-5,00",
            "02/03/2025;;-5,00",
            "03/03/2025;Sem valor;",
            "04/03/2025;Valor ruim;abc",
            "31/02/2025;Data ruim;-1,00",
            "",
            "05/03/2025;Salário;3.000,00",
        ]
    )
    txs = normalize_rows(parse_csv(text))
    assert [(tx.description, tx.amount, tx.kind) for tx in txs] == [
        ("Mercado", -10.0, "expense"),
        ("Salário", 3000.0, "income"),
    ]
    assert txs[1].category == "Renda"


def test_explicit_category_column_wins_when_present():
    text = "\n".join(
        [
            "date,description,amount,category",
            "2025-03-01,Uber,-20.00,Trabalho",
            "2025-03-02,Uber,-15.00,",
        ]
    )
    txs = normalize_rows(parse_csv(text))
    assert [tx.category for tx in txs] == ["Trabalho", "Transporte"]


def test_zero_amount_is_income():
    txs = normalize_rows(parse_csv("Data,Descricao,Valor\n01/01/2025,Estorno,0.00"))
    assert txs[0].kind == "income"


def test_empty_input_normalizes_to_nothing():
    assert normalize_rows([]) == []
