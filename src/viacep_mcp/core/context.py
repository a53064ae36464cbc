from __future__ import annotations

import asyncio
import time


class ContextCancelled(Exception):
    """The context was cancelled explicitly."""

    def __str__(self) -> str:
        return "context cancelled"


class DeadlineExceeded(Exception):
    """The context deadline elapsed."""

    def __str__(self) -> str:
        return "context deadline exceeded"


class LookupContext:
    """
    Deadline + explicit cancel signal for a single lookup.

    The deadline is fixed at construction (monotonic clock), so a context
    created with ``with_timeout(0.5)`` expires 0.5s later whether or not
    anything is waiting on it.
    """

    def __init__(self, *, deadline: float | None = None) -> None:
        self._deadline = deadline
        self._cancelled = asyncio.Event()
        self._reason: BaseException | None = None

    @classmethod
    def background(cls) -> LookupContext:
        """A context that never fires on its own."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> LookupContext:
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def reason(self) -> BaseException | None:
        if self._reason is None and self._deadline is not None and time.monotonic() >= self._deadline:
            self._reason = DeadlineExceeded()
        return self._reason

    def done(self) -> bool:
        return self.reason is not None

    def cancel(self) -> None:
        # an elapsed deadline takes precedence over a later cancel
        if self.reason is None:
            self._reason = ContextCancelled()
        self._cancelled.set()

    async def wait(self) -> BaseException:
        """Suspend until the context is cancelled or its deadline elapses; return the reason."""
        if self._deadline is None:
            await self._cancelled.wait()
        else:
            remaining = self._deadline - time.monotonic()
            if remaining > 0:
                try:
                    await asyncio.wait_for(self._cancelled.wait(), timeout=remaining)
                except asyncio.TimeoutError:
                    pass
        reason = self.reason
        if reason is None:
            # woke at the deadline boundary before the monotonic clock caught up
            self._reason = reason = DeadlineExceeded()
        return reason
