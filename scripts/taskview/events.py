"""
Event Source: merges key presses with a fixed-rate tick.

A background thread polls an InputDevice with a timeout equal to the time
left until the next tick, and puts KeyPress/Tick events on a FIFO queue read
by a single consumer.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable, Protocol, Union

logger = logging.getLogger(__name__)

# Seconds between Tick events
TICK_INTERVAL = 1.0


class InputDeviceError(Exception):
    """The input device can no longer be read."""


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class InputFailed:
    """Terminal event: the source aborted because input became unreadable."""

    error: InputDeviceError


Event = Union[KeyPress, Tick, InputFailed]


class InputDevice(Protocol):
    """Protocol for a source of key presses."""

    def read_key(self, timeout: float) -> str | None:
        """Wait up to ``timeout`` seconds for a key.

        Returns None when the timeout elapses. Raises InputDeviceError when
        the device is unreadable.
        """
        ...


class KeyFeed:
    """InputDevice fed by another component (e.g. a UI's key handler)."""

    def __init__(self) -> None:
        self._keys: queue.Queue[str | None] = queue.Queue()
        self._closed = False

    def push(self, key: str) -> None:
        if not self._closed:
            self._keys.put(key)

    def close(self) -> None:
        """Mark the device unreadable; pending and future reads fail."""
        self._closed = True
        self._keys.put(None)

    def read_key(self, timeout: float) -> str | None:
        if self._closed and self._keys.empty():
            raise InputDeviceError("key feed closed")
        try:
            key = self._keys.get(timeout=timeout)
        except queue.Empty:
            return None
        if key is None:
            raise InputDeviceError("key feed closed")
        return key


class EventSource:
    """Single producer of the event channel."""

    def __init__(
        self,
        device: InputDevice,
        channel: queue.Queue[Event] | None = None,
        tick_interval: float = TICK_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        self._device = device
        self.channel: queue.Queue[Event] = channel if channel is not None else queue.Queue()
        self._tick_interval = tick_interval
        self._clock = clock
        self._last_tick = clock()
        self._aborted = False
        self._thread: threading.Thread | None = None

    @property
    def tick_interval(self) -> float:
        return self._tick_interval

    @property
    def aborted(self) -> bool:
        return self._aborted

    def timeout(self) -> float:
        """Time left until the next tick deadline, never negative."""
        return max(self._tick_interval - (self._clock() - self._last_tick), 0.0)

    def poll_once(self) -> bool:
        """Run one poll cycle. Returns False once the source has aborted."""
        if self._aborted:
            return False
        try:
            key = self._device.read_key(self.timeout())
        except InputDeviceError as exc:
            logger.error("Input device failed: %s", exc)
            self._aborted = True
            self.channel.put(InputFailed(exc))
            return False

        if key is not None:
            self.channel.put(KeyPress(key))

        # Keys never push the deadline back
        if self._clock() - self._last_tick >= self._tick_interval:
            self.channel.put(Tick())
            self._last_tick = self._clock()
        return True

    def run(self) -> None:
        logger.debug("Event source started (tick every %.3fs)", self._tick_interval)
        while self.poll_once():
            pass

    def start(self) -> threading.Thread:
        """Run the source on a daemon thread; it ends with the process."""
        self._last_tick = self._clock()
        self._thread = threading.Thread(
            target=self.run, name="taskview-events", daemon=True
        )
        self._thread.start()
        return self._thread
