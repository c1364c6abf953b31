"""In-memory per-session selection state.

Each client session owns one SessionState: the skills and interests it has
toggled on, its education level, and the last predicted career. Every
mutation is followed by an explicit notify to subscribed listeners.

Nothing is written to disk: state lives as long as the process.
Thread-safe via threading.Lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from career_predictor.models import EducationLevel, SessionState, normalise_token

logger = logging.getLogger(__name__)

Listener = Callable[[SessionState], None]


def _toggle(tokens: list[str], token: str) -> list[str]:
    token = normalise_token(token)
    if not token:
        return tokens
    if token in tokens:
        return [t for t in tokens if t != token]
    return [*tokens, token]


class SelectionStore:
    """Thread-safe store of SessionState keyed by session id."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: dict[str, SessionState] = {}
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: SessionState) -> None:
        # Called outside the lock so listeners may read the store
        for listener in list(self._listeners):
            listener(state)

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get(self, session_id: str) -> SessionState:
        """Return the session state, or a fresh empty one that is not stored.

        Only mutations create sessions, so reads never grow the store.
        """
        with self._lock:
            state = self._sessions.get(session_id)
        if state is None:
            state = SessionState(session_id=session_id)
        return state

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def _update(self, session_id: str, mutate: Callable[[SessionState], SessionState]) -> SessionState:
        with self._lock:
            current = self._sessions.get(session_id) or SessionState(session_id=session_id)
            state = mutate(current)
            self._sessions[session_id] = state
        self._notify(state)
        return state

    def toggle_skill(self, session_id: str, skill: str) -> SessionState:
        """Add *skill* when absent, remove it when present."""
        return self._update(session_id, lambda s: s.model_copy(update={
            "selection": s.selection.model_copy(
                update={"skills": _toggle(s.selection.skills, skill)}
            ),
        }))

    def toggle_interest(self, session_id: str, interest: str) -> SessionState:
        """Add *interest* when absent, remove it when present."""
        return self._update(session_id, lambda s: s.model_copy(update={
            "selection": s.selection.model_copy(
                update={"interests": _toggle(s.selection.interests, interest)}
            ),
        }))

    def set_education(self, session_id: str, education: Optional[EducationLevel]) -> SessionState:
        """Set the education level, or unset it with None."""
        return self._update(session_id, lambda s: s.model_copy(update={
            "selection": s.selection.model_copy(update={"education": education}),
        }))

    def record_prediction(self, session_id: str, career: str) -> SessionState:
        return self._update(
            session_id, lambda s: s.model_copy(update={"predicted_career": career})
        )

    def clear(self, session_id: str) -> SessionState:
        """Drop every selection and the predicted career for this session."""
        state = self._update(session_id, lambda s: SessionState(session_id=s.session_id))
        logger.info("Cleared selections", extra={"session_id": session_id})
        return state

    def reset(self, session_id: str) -> None:
        """Forget the session entirely; listeners see it emptied."""
        with self._lock:
            dropped = self._sessions.pop(session_id, None)
        if dropped is not None:
            self._notify(SessionState(session_id=session_id))


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_store: Optional[SelectionStore] = None


def get_store() -> SelectionStore:
    global _store
    if _store is None:
        _store = SelectionStore()
    return _store
