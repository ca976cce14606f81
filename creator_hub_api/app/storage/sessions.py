"""
In‑memory session backing store.

Sessions map an opaque session id to a small dict (for example
``{"user_id": 3}``).  Each entry carries its own expiry time.  Expired
entries already read as absent; the periodic sweep started by
``start`` only reclaims their memory.  The sweep interval defaults to
24 hours.
"""

import asyncio
import logging
import threading
import time
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_CHECK_PERIOD = 24 * 60 * 60
DEFAULT_TTL = 24 * 60 * 60


class MemorySessionStore:
    """Key/value session store with expiry and a periodic prune task."""

    def __init__(self, check_period: int = DEFAULT_CHECK_PERIOD, ttl: int = DEFAULT_TTL) -> None:
        self.check_period = check_period
        self.ttl = ttl
        self._sessions: Dict[str, Tuple[Dict[str, Any], float]] = {}
        self._lock = threading.Lock()
        self._sweeper: Optional[asyncio.Task] = None

    def _is_expired(self, expires_at: float, now: Optional[float] = None) -> bool:
        return expires_at <= (now if now is not None else time.time())

    def get(self, sid: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            entry = self._sessions.get(sid)
            if entry is None:
                return None
            data, expires_at = entry
            if self._is_expired(expires_at):
                del self._sessions[sid]
                return None
            return dict(data)

    def set(self, sid: str, data: Dict[str, Any], ttl: Optional[int] = None) -> None:
        expires_at = time.time() + (ttl if ttl is not None else self.ttl)
        with self._lock:
            self._sessions[sid] = (dict(data), expires_at)

    def touch(self, sid: str, ttl: Optional[int] = None) -> bool:
        """Push back the expiry of a live session.  Returns ``False`` if absent."""
        with self._lock:
            entry = self._sessions.get(sid)
            if entry is None or self._is_expired(entry[1]):
                return False
            self._sessions[sid] = (entry[0], time.time() + (ttl if ttl is not None else self.ttl))
            return True

    def destroy(self, sid: str) -> None:
        with self._lock:
            self._sessions.pop(sid, None)

    def all(self) -> Dict[str, Dict[str, Any]]:
        now = time.time()
        with self._lock:
            return {
                sid: dict(data)
                for sid, (data, expires_at) in self._sessions.items()
                if not self._is_expired(expires_at, now)
            }

    def length(self) -> int:
        return len(self.all())

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def prune(self) -> int:
        """Delete expired sessions and return how many were removed."""
        now = time.time()
        with self._lock:
            expired = [sid for sid, (_, expires_at) in self._sessions.items() if self._is_expired(expires_at, now)]
            for sid in expired:
                del self._sessions[sid]
        if expired:
            logger.info("Pruned %d expired sessions", len(expired))
        return len(expired)

    # ------------------------------------------------------------------
    # Periodic sweep
    # ------------------------------------------------------------------

    async def _sweep_forever(self) -> None:
        while True:
            await asyncio.sleep(self.check_period)
            self.prune()

    def start(self) -> None:
        """Schedule the sweep on the running event loop (idempotent)."""
        if self._sweeper is None or self._sweeper.done():
            self._sweeper = asyncio.get_running_loop().create_task(self._sweep_forever())
            logger.debug("Session sweep started, period %ss", self.check_period)

    async def stop(self) -> None:
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass
        self._sweeper = None
