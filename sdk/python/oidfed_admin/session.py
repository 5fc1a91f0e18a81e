"""Per-client session state: bearer token, default account and renewal timer."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


class Session:
    """Mutable state shared by one client's transport and auth service.

    At most one renewal timer is pending at any time: scheduling a new one
    cancels the previous handle. The timer thread and the caller's thread both
    touch this object, so every mutation happens under ``_lock``.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        default_account: Optional[str] = None,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token: Optional[str] = token
        self._default_account: Optional[str] = default_account
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def default_account(self) -> Optional[str]:
        return self._default_account

    @property
    def generation(self) -> int:
        """Bumped by :meth:`quit`; renewals scheduled before a quit check it and stand down."""
        return self._generation

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    @property
    def has_pending_renewal(self) -> bool:
        return self._timer is not None

    def set_token(self, token: str, expected_generation: Optional[int] = None) -> bool:
        """Store ``token``; refused (returns False) when ``expected_generation`` is stale."""
        with self._lock:
            if expected_generation is not None and expected_generation != self._generation:
                return False
            self._token = token
        return True

    def clear_token(self) -> None:
        with self._lock:
            self._token = None

    def set_default_account(self, username: Optional[str]) -> None:
        with self._lock:
            self._default_account = username

    def schedule_renewal(
        self,
        delay: float,
        callback: Callable[[], None],
        expected_generation: Optional[int] = None,
    ) -> bool:
        """Run ``callback`` once after ``delay`` seconds, replacing any pending renewal.

        Nothing is scheduled when ``expected_generation`` no longer matches,
        i.e. :meth:`quit` ran since the caller captured it.
        """
        timer = self._timer_factory(delay, callback)
        timer.daemon = True
        with self._lock:
            if expected_generation is not None and expected_generation != self._generation:
                return False
            previous, self._timer = self._timer, timer
        if previous is not None:
            previous.cancel()
        timer.start()
        logger.debug("Token renewal scheduled", extra={"delay_seconds": delay})
        return True

    def cancel_renewal(self) -> None:
        with self._lock:
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
            logger.debug("Pending token renewal cancelled")

    def quit(self) -> None:
        """Forget the token and cancel renewal. Safe to call at any time."""
        with self._lock:
            self._token = None
            self._generation += 1
        self.cancel_renewal()

    def __repr__(self) -> str:
        return (
            f"Session(base_url={self.base_url!r}, authenticated={self.is_authenticated}, "
            f"default_account={self._default_account!r})"
        )
