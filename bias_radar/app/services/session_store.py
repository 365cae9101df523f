"""In-memory store of comparison sessions keyed by cookie id."""

from __future__ import annotations

import secrets
from collections import OrderedDict
from typing import Optional, Tuple

from bias_radar.app.core.config import Settings, get_settings
from bias_radar.app.core.logging import get_logger
from bias_radar.app.services.comparison_service import ComparisonSession

logger = get_logger(__name__, component="SessionStore")


class SessionStore:
    """Bounded LRU map of session id to ComparisonSession. Nothing is persisted."""

    def __init__(self, *, max_sessions: int | None = None, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.max_sessions = max_sessions or settings.max_sessions
        self._sessions: OrderedDict[str, ComparisonSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: Optional[str]) -> Optional[ComparisonSession]:
        if not session_id or session_id not in self._sessions:
            return None
        self._sessions.move_to_end(session_id)
        return self._sessions[session_id]

    def create(self) -> Tuple[str, ComparisonSession]:
        session_id = secrets.token_urlsafe(24)
        session = ComparisonSession()
        self._sessions[session_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.debug("session_evicted", session_id=evicted_id)
        return session_id, session

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, ComparisonSession]:
        session = self.get(session_id)
        if session is not None:
            return session_id, session
        return self.create()


_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    global _store
    if _store is None:
        _store = SessionStore()
    return _store
