"""Interactive session lifecycle (load, edit, analyze, clear, export)."""

from common.models import SessionState

from .state_machine import TextSession, TransitionListener

__all__ = ["SessionState", "TextSession", "TransitionListener"]
