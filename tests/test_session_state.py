"""Tests for the interactive text session lifecycle."""
from __future__ import annotations

from typing import List, Tuple

import pytest

from common.errors import BackendError, EmptyInputError, ErrorCode, NothingToExportError
from common.models import AnalysisResult, SessionState
from core.session import TextSession
from core.session import state_machine


def test_new_session_is_empty() -> None:
    session = TextSession()

    assert session.state is SessionState.EMPTY
    assert session.raw_text == ""
    assert session.last_result is None


def test_load_does_not_analyze() -> None:
    session = TextSession()
    session.load("Some text.")

    assert session.state is SessionState.LOADED
    assert session.raw_text == "Some text."
    assert session.last_result is None


def test_load_blank_text_stays_empty() -> None:
    session = TextSession()
    session.load("")
    assert session.state is SessionState.EMPTY
    session.load("   \n")
    assert session.state is SessionState.EMPTY


def test_analyze_stores_result() -> None:
    session = TextSession()
    session.load("Is it raining? Yes it is. Run!")

    result = session.analyze()

    assert session.state is SessionState.ANALYZED
    assert session.last_result == result
    assert result.sentence_count == 3


def test_failed_analyze_keeps_previous_result() -> None:
    session = TextSession()
    session.load("First. Second.")
    previous = session.analyze()

    session.edit("   ")
    with pytest.raises(EmptyInputError):
        session.analyze()

    assert session.last_result == previous
    assert session.raw_text == "   "


def test_clear_is_idempotent() -> None:
    session = TextSession()
    session.load("Text.")
    session.analyze()

    session.clear()
    session.clear()

    assert session.state is SessionState.EMPTY
    assert session.raw_text == ""
    assert session.last_result is None


def test_export_after_clear_fails() -> None:
    session = TextSession()
    session.load("Text.")
    session.analyze()
    session.clear()

    with pytest.raises(NothingToExportError):
        session.export()


def test_export_without_analyze_fails() -> None:
    session = TextSession()
    session.load("text")

    with pytest.raises(NothingToExportError) as exc:
        session.export()
    assert "analyzed" in exc.value.reason


def test_export_rejects_all_zero_result(monkeypatch) -> None:
    monkeypatch.setattr(state_machine, "analyze_text", lambda text: AnalysisResult())
    session = TextSession()
    session.load("anything")
    session.analyze()

    with pytest.raises(NothingToExportError) as exc:
        session.export()
    assert "no counts" in exc.value.reason


def test_export_returns_raw_text_verbatim() -> None:
    session = TextSession()
    session.load("  Line one.\nLine two?\n")
    result = session.analyze()

    payload = session.export()

    assert payload.text == "  Line one.\nLine two?\n"
    assert payload.result == result


def test_load_drops_stale_result_by_default() -> None:
    session = TextSession()
    session.load("Old text.")
    session.analyze()

    session.load("New text!")

    assert session.state is SessionState.LOADED
    assert session.last_result is None
    with pytest.raises(NothingToExportError):
        session.export()


def test_load_keeps_stale_result_in_parity_mode() -> None:
    session = TextSession(clear_result_on_load=False)
    session.load("Old text.")
    stale = session.analyze()

    session.load("New text!")

    assert session.state is SessionState.LOADED
    assert session.last_result == stale
    assert session.export().text == "New text!"


def test_edit_never_recomputes_result() -> None:
    session = TextSession()
    session.load("One.")
    first = session.analyze()

    session.edit("One. Two. Three.")

    assert session.state is SessionState.ANALYZED
    assert session.last_result == first
    assert session.analyze().sentence_count == 3


def test_transitions_are_reported() -> None:
    events: List[Tuple[SessionState, str]] = []
    session = TextSession(on_transition=lambda state, detail: events.append((state, detail)))

    session.load("Hi there.")
    session.analyze()
    session.clear()

    assert [state for state, _ in events] == [
        SessionState.LOADED,
        SessionState.ANALYZED,
        SessionState.EMPTY,
    ]
    assert events[1][1] == "sentences=1 words=2"


def test_disallowed_transition_raises_state_error() -> None:
    events: List[Tuple[SessionState, str]] = []
    session = TextSession(on_transition=lambda state, detail: events.append((state, detail)))

    with pytest.raises(BackendError) as exc:
        session._transition(SessionState.ANALYZED, detail="forced")

    assert exc.value.code == ErrorCode.STATE_ERROR
    assert exc.value.context == {"from": "EMPTY", "to": "ANALYZED"}
    assert session.state is SessionState.EMPTY
    assert events == []
