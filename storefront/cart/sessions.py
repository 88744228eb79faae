"""Per-session cart lifecycle: one CartStore per shopper session."""
import threading
import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional

from storefront.errors import SessionNotFound
from storefront.logging import get_logger, sanitize_id_for_logging
from .service import CartStore

logger = get_logger(__name__)


@dataclass
class _Session:
    store: CartStore
    last_seen: float


class CartSessions:
    """
    Creates, looks up and discards CartStores keyed by session id.

    Sessions idle for longer than ttl_seconds are dropped, and once
    max_sessions are open the least recently used one makes room for a
    new one. Both checks run on open() and get().
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        max_sessions: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_sessions is not None and max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max_sessions
        self._clock = clock
        # Ordered oldest access first
        self._sessions: OrderedDict[str, _Session] = OrderedDict()
        self._lock = threading.Lock()

    def open(self, session_id: Optional[str] = None) -> str:
        """Start a session with an empty cart. An id already open is kept as is."""
        session_id = session_id or uuid.uuid4().hex
        with self._lock:
            now = self._clock()
            self._expire(now)
            session = self._sessions.get(session_id)
            if session is not None:
                self._touch(session_id, session, now)
                return session_id

            if self.max_sessions is not None:
                while len(self._sessions) >= self.max_sessions:
                    evicted, _ = self._sessions.popitem(last=False)
                    logger.info(f"Cart session evicted (limit): {sanitize_id_for_logging(evicted)}")

            self._sessions[session_id] = _Session(store=CartStore(), last_seen=now)
        logger.info(f"Cart session opened: {sanitize_id_for_logging(session_id)}")
        return session_id

    def get(self, session_id: str) -> CartStore:
        with self._lock:
            now = self._clock()
            self._expire(now)
            session = self._sessions.get(session_id)
            if session is None:
                raise SessionNotFound(session_id)
            self._touch(session_id, session, now)
            return session.store

    def close(self, session_id: str) -> None:
        """End a session and discard its cart."""
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFound(session_id)
        logger.info(f"Cart session closed: {sanitize_id_for_logging(session_id)}")

    def _touch(self, session_id: str, session: _Session, now: float) -> None:
        session.last_seen = now
        self._sessions.move_to_end(session_id)

    def _expire(self, now: float) -> None:
        if self.ttl_seconds is None:
            return
        while self._sessions:
            session_id, session = next(iter(self._sessions.items()))
            if now - session.last_seen < self.ttl_seconds:
                break
            del self._sessions[session_id]
            logger.info(f"Cart session expired: {sanitize_id_for_logging(session_id)}")

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
