"""Structured session event logging."""
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, Optional

from .models import SessionState


class SessionEventLogger:
    """Writes session transitions and shell actions to JSONL for later inspection."""

    def __init__(self, path: Optional[Path]) -> None:
        self.path = path
        if path:
            path.parent.mkdir(parents=True, exist_ok=True)

    def on_transition(self, state: SessionState, detail: str) -> None:
        self.emit("transition", state=state.value, detail=detail)

    def emit(self, event: str, **fields: Any) -> None:
        if not self.path:
            return
        payload: Dict[str, Any] = {"event": event, **fields, "timestamp": time.time()}
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(payload, ensure_ascii=False))
            handle.write("\n")
