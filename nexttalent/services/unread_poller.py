"""
Background refresher for the unread-notification badge.

One poller per badge owner: it re-counts every ``interval_seconds`` and
immediately whenever ``refresh()`` is called. ``stop()`` is the cancellation
handle; the current count finishes and the loop exits.
"""
import logging
import threading
from datetime import datetime, timezone
from typing import Callable

from nexttalent.config import settings
from nexttalent.core.session import SessionContext
from nexttalent.database import SessionLocal
from nexttalent.services.notification_service import count_unread

logger = logging.getLogger(__name__)


class UnreadCountPoller:
    def __init__(
        self,
        context: SessionContext,
        session_factory: Callable = SessionLocal,
        interval_seconds: float | None = None,
        on_update: Callable[[int], None] | None = None,
    ) -> None:
        self.context = context
        self.session_factory = session_factory
        self.interval_seconds = interval_seconds or settings.unread_poll_interval_seconds
        self.on_update = on_update

        self._lock = threading.Lock()
        self._wake = threading.Event()
        self._running = False
        self._thread: threading.Thread | None = None
        self._unread_count = 0
        self._last_poll: datetime | None = None

    @property
    def unread_count(self) -> int:
        with self._lock:
            return self._unread_count

    def poll_once(self) -> int | None:
        """Count unread notifications now. Errors are logged and the old count kept."""
        db = self.session_factory()
        try:
            count = count_unread(db, self.context.actor_id, self.context.role)
        except Exception as e:
            logger.exception("Unread count refresh failed for %s: %s", self.context.actor_id, e)
            return None
        finally:
            db.close()
        with self._lock:
            self._unread_count = count
            self._last_poll = datetime.now(timezone.utc)
        if self.on_update:
            self.on_update(count)
        return count

    def _loop(self) -> None:
        logger.info("Unread poller started for %s (%s)", self.context.actor_id, self.context.role.value)
        while True:
            with self._lock:
                if not self._running:
                    break
            self._wake.clear()
            self.poll_once()
            self._wake.wait(self.interval_seconds)
        logger.info("Unread poller stopped for %s", self.context.actor_id)

    def start(self) -> bool:
        """Poll now and then every interval. Returns False if already running."""
        with self._lock:
            if self._running:
                return False
            self._running = True
            self._wake.clear()
            self._thread = threading.Thread(target=self._loop, daemon=True)
            self._thread.start()
        return True

    def refresh(self) -> None:
        """Wake the loop for an immediate recount (e.g. the tab regained focus)."""
        self._wake.set()

    def stop(self, timeout: float | None = None) -> bool:
        with self._lock:
            if not self._running:
                return False
            self._running = False
            thread = self._thread
        self._wake.set()
        if thread and thread is not threading.current_thread():
            thread.join(timeout)
        return True

    def get_status(self) -> dict:
        with self._lock:
            return {
                "running": self._running,
                "unread_count": self._unread_count,
                "last_poll": self._last_poll.isoformat() if self._last_poll else None,
                "interval_seconds": self.interval_seconds,
            }
