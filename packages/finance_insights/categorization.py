"""Keyword-based category detection for transaction descriptions.

The rule table is plain data: an ordered sequence of ``(label, keywords)``
pairs. Detection lower-cases the description and returns the label of the
first rule with a keyword contained in it, so ordering matters (``gasolina``
must hit Transporte before ``gas`` reaches Contas).
"""

from __future__ import annotations

from collections.abc import Sequence

FALLBACK_CATEGORY = "Outros"

CATEGORY_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Alimentação", ("mercado", "supermercado", "padaria", "acougue", "açougue")),
    ("Alimentação", ("ifood", "restaurante", "lanchonete", "pizzaria")),
    ("Moradia", ("aluguel", "condominio", "condomínio", "iptu")),
    ("Transporte", ("uber", "99", "combustivel", "combustível", "gasolina", "estacionamento")),
    ("Renda", ("salario", "salário", "freelance", "pix recebido")),
    ("Contas", ("luz", "energia", "agua", "água", "gas", "internet", "telefone")),
    (
        "Saúde",
        ("farmacia", "farmácia", "saude", "saúde", "medico", "médico", "hospital", "plano de saude"),
    ),
    ("Educação", ("escola", "curso", "faculdade", "livro", "udemy")),
    ("Lazer", ("lazer", "cinema", "netflix", "spotify", "viagem", "hotel")),
)


def _labels(rules: Sequence[tuple[str, Sequence[str]]]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for label, _keywords in rules:
        seen.setdefault(label, None)
    seen.setdefault(FALLBACK_CATEGORY, None)
    return tuple(seen)


# Closed label set in display order, ending with the catch-all.
CATEGORIES: tuple[str, ...] = _labels(CATEGORY_RULES)


def detect_category(
    description: str,
    *,
    rules: Sequence[tuple[str, Sequence[str]]] = CATEGORY_RULES,
) -> str:
    """Return the first matching category label for ``description``."""

    text = description.lower()
    for label, keywords in rules:
        if any(keyword in text for keyword in keywords):
            return label
    return FALLBACK_CATEGORY


__all__ = ["CATEGORIES", "CATEGORY_RULES", "FALLBACK_CATEGORY", "detect_category"]
