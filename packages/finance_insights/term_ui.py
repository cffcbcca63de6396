"""Tiny terminal UI helpers (prompt_toolkit-based) for manual entries.

Kept apart from the pipeline so the prompts can be tested in isolation with a
pipe input, and so the interactive loop can be driven by a fake ``ask``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeAlias

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggest, Suggestion
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.validation import ValidationError, Validator
from pydantic import ValidationError as ModelValidationError

from .categorization import CATEGORIES, FALLBACK_CATEGORY
from .logging_setup import get_logger
from .manual_entry import ManualEntry
from .models import Transaction

_logger = get_logger("finance_insights.term_ui")

# ask(message, default) -> answer
Ask: TypeAlias = Callable[[str, str], str]


class _PrefixSuggest(AutoSuggest):
    """Grey inline completion for the first category starting with the input."""

    def __init__(self, vocab: Sequence[str]) -> None:
        self._vocab = list(vocab)

    def get_suggestion(self, buffer, document):
        text = document.text
        if not text:
            return None
        lower = text.lower()
        for word in self._vocab:
            wl = word.lower()
            if wl == lower:
                return None
            if wl.startswith(lower):
                return Suggestion(word[len(text) :])
        return None


class _OneOf(Validator):
    def __init__(self, vocab: Sequence[str]) -> None:
        self._lower = {w.lower() for w in vocab}

    def validate(self, document) -> None:
        if document.text.strip().lower() not in self._lower:
            raise ValidationError(message="Categoria desconhecida", cursor_position=len(document.text))


def select_category(
    categories: Sequence[str] = CATEGORIES,
    *,
    default: str = FALLBACK_CATEGORY,
    message: str = "Categoria (Enter para aceitar): ",
    session: PromptSession | None = None,
) -> str:
    """Prompt for one of ``categories``; returns its canonical spelling.

    The default is pre-filled, Tab opens the completion menu and a prefix
    shows the first matching category as inline ghost text.
    """

    words = list(categories)
    completer = WordCompleter(words, ignore_case=True, match_middle=True)
    sess = session or PromptSession()
    answer = sess.prompt(
        message,
        default=default,
        completer=completer,
        auto_suggest=_PrefixSuggest(words),
        validator=_OneOf(words),
        validate_while_typing=False,
    )
    by_lower = {w.lower(): w for w in words}
    return by_lower[answer.strip().lower()]


def _session_ask(session: PromptSession) -> Ask:
    def ask(message: str, default: str) -> str:
        return session.prompt(message, default=default)

    return ask


def prompt_manual_entries(
    *,
    ask: Ask | None = None,
    choose_category: Callable[[], str] | None = None,
    echo: Callable[[str], None] = print,
) -> list[Transaction]:
    """Collect manual transactions until an empty description is entered.

    Invalid entries are reported through ``echo`` and skipped; the loop keeps
    going so one typo does not discard the session.
    """

    session: PromptSession | None = None
    if ask is None or choose_category is None:
        session = PromptSession()
    ask = ask or _session_ask(session)
    choose_category = choose_category or (lambda: select_category(session=session))

    entries: list[Transaction] = []
    last_date = ""
    while True:
        description = ask("Descrição (vazio para terminar): ", "").strip()
        if not description:
            break
        when = ask("Data (DD/MM/AAAA): ", last_date)
        amount = ask("Valor (R$): ", "")
        kind_answer = ask("Tipo [g]asto/[e]ntrada: ", "g").strip().lower()
        kind = "income" if kind_answer.startswith("e") else "expense"
        category = choose_category()

        try:
            entry = ManualEntry(
                date=when, description=description, amount=amount, kind=kind, category=category
            )
        except ModelValidationError as exc:
            _logger.debug("manual entry rejected: %s", exc)
            echo(f"Entrada ignorada: {exc.errors()[0]['msg']}")
            continue

        entries.append(entry.to_transaction())
        last_date = when
    return entries


__all__ = ["prompt_manual_entries", "select_category"]
