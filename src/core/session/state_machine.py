"""State machine tracking one interactive text session."""
from __future__ import annotations

from typing import Callable, Dict, FrozenSet, Optional

from common.errors import BackendError, EmptyInputError, ErrorCode, NothingToExportError
from common.models import AnalysisResult, ExportPayload, SessionState
from core.analysis import analyze as analyze_text

TransitionListener = Callable[[SessionState, str], None]

_ALLOWED: Dict[SessionState, FrozenSet[SessionState]] = {
    SessionState.EMPTY: frozenset({SessionState.EMPTY, SessionState.LOADED}),
    SessionState.LOADED: frozenset({SessionState.EMPTY, SessionState.LOADED, SessionState.ANALYZED}),
    SessionState.ANALYZED: frozenset({SessionState.EMPTY, SessionState.LOADED, SessionState.ANALYZED}),
}


class TextSession:
    """Owns the editable text buffer and the last analysis result.

    ``last_result`` only changes through ``analyze()`` and ``clear()`` (and ``load()``
    when ``clear_result_on_load`` is set); editing the text never recomputes it.
    """

    def __init__(
        self,
        *,
        clear_result_on_load: bool = True,
        on_transition: Optional[TransitionListener] = None,
    ) -> None:
        self.clear_result_on_load = clear_result_on_load
        self._on_transition = on_transition
        self._raw_text = ""
        self._last_result: Optional[AnalysisResult] = None
        self._state = SessionState.EMPTY

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @property
    def last_result(self) -> Optional[AnalysisResult]:
        return self._last_result

    def load(self, text: str) -> None:
        """Replace the buffer with freshly loaded text without analyzing it."""

        self._raw_text = text
        if self.clear_result_on_load:
            self._last_result = None
        self._transition(self._buffer_state(), detail=f"load chars={len(text)}")

    def edit(self, text: str) -> None:
        if text == self._raw_text:
            return
        self._raw_text = text
        target = self._buffer_state()
        if target is SessionState.LOADED and self._state is SessionState.ANALYZED:
            # Stale result stays attached until the next analyze().
            target = SessionState.ANALYZED
        self._transition(target, detail=f"edit chars={len(text)}")

    def analyze(self) -> AnalysisResult:
        if not self._raw_text.strip():
            raise EmptyInputError()
        result = analyze_text(self._raw_text)
        self._last_result = result
        self._transition(
            SessionState.ANALYZED,
            detail=f"sentences={result.sentence_count} words={result.word_count}",
        )
        return result

    def clear(self) -> None:
        self._raw_text = ""
        self._last_result = None
        self._transition(SessionState.EMPTY, detail="clear")

    def export(self) -> ExportPayload:
        if not self._raw_text.strip():
            raise NothingToExportError("text is empty")
        if self._last_result is None:
            raise NothingToExportError("text has not been analyzed")
        if self._last_result.is_empty:
            raise NothingToExportError("analysis produced no counts")
        return ExportPayload(text=self._raw_text, result=self._last_result)

    def _buffer_state(self) -> SessionState:
        return SessionState.LOADED if self._raw_text.strip() else SessionState.EMPTY

    def _transition(self, target: SessionState, *, detail: str) -> None:
        if target not in _ALLOWED[self._state]:
            raise BackendError(
                ErrorCode.STATE_ERROR,
                f"Invalid transition {self._state.value} -> {target.value}",
                context={"from": self._state.value, "to": target.value},
            )
        self._state = target
        if self._on_transition is not None:
            self._on_transition(target, detail)
