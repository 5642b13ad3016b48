# Area: Core
"""
car_counter._core.round_timer — Round countdown
===============================================

A one-second countdown driven cooperatively. The owner either calls
``tick()`` itself or calls ``poll()`` regularly, which fires every tick
that is due according to ``time.monotonic()``.

Each countdown is identified by a CountdownToken. ``stop()`` cancels the
token and detaches it, so a tick for that countdown can never reach the
observers afterwards, even if a caller still holds the token.
"""

from __future__ import annotations

import itertools
import logging
import time
from typing import Callable, Optional

logger = logging.getLogger("car_counter.timer")

_token_ids = itertools.count(1)


class CountdownToken:
    """Identifies one countdown started by RoundTimer.start()."""

    __slots__ = ("id", "cancelled")

    def __init__(self) -> None:
        self.id = next(_token_ids)
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        return f"CountdownToken(id={self.id}, cancelled={self.cancelled})"


class RoundTimer:
    """
    Countdown with one active countdown at a time.

    Args:
        on_tick: Called with the remaining seconds after every tick
        on_expire: Called once when the remaining time reaches zero
        tick_seconds: Wall-clock length of one tick for poll()
    """

    def __init__(
        self,
        on_tick: Callable[[int], None],
        on_expire: Callable[[], None],
        tick_seconds: float = 1.0,
    ) -> None:
        if tick_seconds <= 0:
            raise ValueError(f"tick_seconds must be positive, got {tick_seconds}")
        self._on_tick = on_tick
        self._on_expire = on_expire
        self.tick_seconds = tick_seconds
        self._token: Optional[CountdownToken] = None
        self._remaining = 0
        self._next_tick_at = 0.0

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._token is not None

    def start(self, limit: int) -> CountdownToken:
        """Cancel any running countdown and start a new one of ``limit`` seconds."""
        if not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"Countdown limit must be a positive int, got {limit!r}")
        self.stop()
        token = CountdownToken()
        self._token = token
        self._remaining = limit
        self._next_tick_at = time.monotonic() + self.tick_seconds
        logger.debug("Countdown %d started (%ds)", token.id, limit)
        return token

    def stop(self) -> None:
        """Cancel the running countdown. No-op if already stopped."""
        token = self._token
        if token is None:
            return
        token.cancel()
        self._token = None
        logger.debug("Countdown %d stopped (%ds left)", token.id, self._remaining)

    def tick(self, token: Optional[CountdownToken] = None) -> None:
        """
        Advance the active countdown by one second.

        Args:
            token: Countdown the tick belongs to. Defaults to the active one.
                A tick for a cancelled or superseded countdown is ignored.
        """
        active = self._token
        if active is None or (token is not None and token is not active):
            return

        self._remaining -= 1
        self._on_tick(self._remaining)

        # The observer may have stopped or restarted the countdown
        if self._token is not active or active.cancelled:
            return

        if self._remaining <= 0:
            self.stop()
            logger.debug("Countdown %d expired", active.id)
            self._on_expire()

    def poll(self) -> int:
        """
        Fire every tick that is due.

        Returns:
            Number of ticks fired
        """
        fired = 0
        now = time.monotonic()
        while self._token is not None and now >= self._next_tick_at:
            token = self._token
            self._next_tick_at += self.tick_seconds
            self.tick(token)
            fired += 1
        return fired
