"""Host frame scheduling.

The renderer never loops by itself: after each paint pass it asks a
:class:`FrameScheduler` for exactly one more callback, and cancels the
outstanding request when a new ``render()`` arrives. Two hosts are provided:

* :class:`AsyncioFrameScheduler` schedules on the running event loop at a
  fixed frame rate (interactive playback).
* :class:`ManualFrameScheduler` only queues callbacks; the caller fires them
  with :meth:`ManualFrameScheduler.run_pending` (offline capture, tests).
"""

import asyncio
import itertools
import logging
from typing import Callable, Dict, Optional, Protocol

FrameCallback = Callable[[], None]

logger = logging.getLogger(__name__)

DEFAULT_FPS = 60


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> Optional[object]: ...

    def cancel_frame(self, handle: object) -> None: ...


class AsyncioFrameScheduler:
    """Schedules frames on an event loop.

    The loop is taken from the constructor, from :meth:`bind`, or from the
    running loop at request time. With no usable loop (none running, or the
    bound one closed) the request is dropped and ``None`` is returned.
    """

    fps: int

    def __init__(
        self, fps: int = DEFAULT_FPS, loop: Optional[asyncio.AbstractEventLoop] = None
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self._loop = loop

    @property
    def loop(self) -> Optional[asyncio.AbstractEventLoop]:
        return self._loop

    def bind(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    def _usable_loop(self) -> Optional[asyncio.AbstractEventLoop]:
        if self._loop is not None and not self._loop.is_closed():
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def request_frame(self, callback: FrameCallback) -> Optional[asyncio.TimerHandle]:
        loop = self._usable_loop()
        if loop is None:
            logger.debug("No event loop available, dropping frame request")
            return None
        return loop.call_later(1.0 / self.fps, callback)

    def cancel_frame(self, handle: object) -> None:
        if isinstance(handle, asyncio.TimerHandle):
            handle.cancel()


class ManualFrameScheduler:
    def __init__(self) -> None:
        self._pending: Dict[int, FrameCallback] = {}
        self._ids = itertools.count(1)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: object) -> None:
        if isinstance(handle, int):
            self._pending.pop(handle, None)

    def run_pending(self) -> int:
        """Fire the callbacks pending right now; return how many ran.

        Callbacks requested while running are left for the next call.
        """
        callbacks = list(self._pending.values())
        self._pending.clear()
        for callback in callbacks:
            callback()
        return len(callbacks)
