import contextlib
from datetime import date

from prompt_toolkit import PromptSession
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from finance_insights import CATEGORIES
from finance_insights.term_ui import prompt_manual_entries, select_category


@contextlib.contextmanager
def pipe_session():
    with create_pipe_input() as pipe:
        sess = PromptSession(input=pipe, output=DummyOutput())
        yield pipe, sess


def test_select_category_accepts_default_with_enter():
    with pipe_session() as (pipe, sess):
        pipe.send_text("\r")
        assert select_category(CATEGORIES, default="Outros", session=sess) == "Outros"


def test_select_category_returns_canonical_spelling():
    with pipe_session() as (pipe, sess):
        # Ctrl-A (home), Ctrl-K (kill to end), type lower-case label, Enter
        pipe.send_text("\x01\x0blazer\r")
        assert select_category(CATEGORIES, default="Outros", session=sess) == "Lazer"


def test_select_category_exact_accented_label():
    with pipe_session() as (pipe, sess):
        pipe.send_text("\x01\x0bSaúde\r")
        assert select_category(CATEGORIES, default="Outros", session=sess) == "Saúde"


def _scripted(answers):
    it = iter(answers)

    def ask(message, default):
        answer = next(it)
        return answer or default

    return ask


def test_prompt_manual_entries_collects_until_blank_description():
    ask = _scripted(
        [
            "Feira", "05/03/2025", "45,50", "g",
            "Freela", "", "1.200,00", "e",
            "Erro", "05/03/2025", "abc", "g",
            "",
        ]
    )
    categories = iter(["Alimentação", "Renda", "Outros"])
    echoed = []

    entries = prompt_manual_entries(
        ask=ask, choose_category=lambda: next(categories), echo=echoed.append
    )

    assert [(tx.description, tx.amount, tx.kind, tx.category) for tx in entries] == [
        ("Feira", -45.5, "expense", "Alimentação"),
        ("Freela", 1200.0, "income", "Renda"),
    ]
    # Blank date reuses the previous entry's date.
    assert entries[1].date == date(2025, 3, 5)
    assert len(echoed) == 1
    assert echoed[0].startswith("Entrada ignorada")


def test_prompt_manual_entries_empty_session():
    entries = prompt_manual_entries(ask=_scripted([""]), choose_category=lambda: "Outros")
    assert entries == []
