"""
Single-owner executor serializing all database work.

Every storage operation is a coroutine. ``AccessSerializer.run`` hands it to
an event loop living on one dedicated thread and blocks the calling thread
until it finishes. Operations additionally hold an ``asyncio.Lock`` for their
whole duration, so two operations never interleave at an ``await`` either.
"""

import asyncio
import logging
import threading
from typing import Any, Awaitable, Callable, Optional

from folio.core.exceptions import StorageClosedError

logger = logging.getLogger(__name__)


class AccessSerializer:
    """Runs submitted coroutines one at a time on a private event loop"""

    def __init__(self, name: str = "folio-db"):
        self._loop = asyncio.new_event_loop()
        self._lock: Optional[asyncio.Lock] = None
        self._closed = False
        self._state_lock = threading.Lock()
        self._thread = threading.Thread(target=self._run_loop, name=name, daemon=True)
        self._thread.start()

    def _run_loop(self):
        asyncio.set_event_loop(self._loop)
        try:
            self._loop.run_forever()
        finally:
            self._loop.close()
            logger.debug(f"Event loop of {self._thread.name} closed")

    async def _guarded(self, fn: Callable[..., Awaitable[Any]], args: tuple) -> Any:
        # Created lazily so it binds to the executor's loop
        if self._lock is None:
            self._lock = asyncio.Lock()
        async with self._lock:
            return await fn(*args)

    @property
    def closed(self) -> bool:
        return self._closed

    def run(self, fn: Callable[..., Awaitable[Any]], *args: Any) -> Any:
        """Run ``fn(*args)`` exclusively and return its result.

        Exceptions raised by ``fn`` are re-raised in the calling thread.
        """
        if threading.current_thread() is self._thread:
            raise RuntimeError("Storage operations cannot be submitted from the storage thread")

        with self._state_lock:
            if self._closed:
                raise StorageClosedError("Storage has been closed")
            future = asyncio.run_coroutine_threadsafe(self._guarded(fn, args), self._loop)
        return future.result()

    def shutdown(self):
        """Wait for in-flight operations, then stop the loop and its thread"""
        if threading.current_thread() is self._thread:
            raise RuntimeError("Storage cannot be shut down from the storage thread")

        with self._state_lock:
            if self._closed:
                return
            self._closed = True
            # Queued behind every operation submitted before the flag flipped
            drained = asyncio.run_coroutine_threadsafe(self._guarded(_noop, ()), self._loop)

        drained.result()
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join()


async def _noop():
    return None
