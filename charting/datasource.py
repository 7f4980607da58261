"""
Mock data streams feeding the charts.

Sources are polled from the host loop with the current time, so timers,
debouncing and rendering all run on one thread.
"""

import logging
from typing import Callable, List, Optional, Sequence

import numpy as np

from .config import CFG
from .entities import ChartRecord

logger = logging.getLogger(__name__)

Listener = Callable[[List[ChartRecord]], None]


class Stream:
    def __init__(self):
        self.value: List[ChartRecord] = []
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _emit(self, value: List[ChartRecord]):
        self.value = value
        for listener in list(self._listeners):
            listener(value)


class ActionsDataSource(Stream):
    """Grows a list of random action records, one attempt every `period` seconds.

    New subscribers immediately receive the current list. A tick that draws
    an action already in the list is skipped; the source stops by itself
    once it holds `max_records` records.
    """

    def __init__(self, period: float, rng: Optional[np.random.Generator] = None,
                 actions: Sequence[str] = CFG.ACTIONS, max_records: int = CFG.MAX_RECORDS,
                 value_ceil: int = CFG.VALUE_CEIL, name: str = "actions"):
        super().__init__()
        self.period = period
        self.rng = rng if rng is not None else np.random.default_rng()
        self.actions = tuple(actions)
        self.max_records = max_records
        self.value_ceil = value_ceil
        self.name = name
        self._next_due: Optional[float] = None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        unsubscribe = super().subscribe(listener)
        listener(self.value)
        return unsubscribe

    @property
    def done(self) -> bool:
        return len(self.value) >= self.max_records

    @property
    def running(self) -> bool:
        return self._next_due is not None and not self.done

    def start(self, now: float):
        """Arm the timer; the first tick fires on the next poll."""
        self._next_due = now

    def poll(self, now: float) -> bool:
        emitted = False
        while self.running and now >= self._next_due:
            self._next_due += self.period
            emitted = self._tick() or emitted
        return emitted

    def _tick(self) -> bool:
        action = self.actions[int(self.rng.integers(0, len(self.actions)))]
        if any(r.title == action for r in self.value):
            return False
        record = ChartRecord(action, (self._generate_number(), self._generate_number()))
        logger.debug("[%s] EMIT %s data=%s", self.name, record.title, record.data)
        self._emit(self.value + [record])
        return True

    def _generate_number(self) -> int:
        return int(self.rng.integers(0, self.value_ceil))


class Debounced(Stream):
    """Re-emits a source's latest value once it has been quiet for `wait` seconds."""

    def __init__(self, source, wait: float):
        super().__init__()
        self.source = source
        self.wait = wait
        self._now: Optional[float] = None
        self._pending: Optional[List[ChartRecord]] = None
        self._deadline: Optional[float] = None
        self._unsubscribe = source.subscribe(self._on_value)

    def _on_value(self, value: List[ChartRecord]):
        self._pending = value
        self._deadline = None if self._now is None else self._now + self.wait

    def start(self, now: float):
        self._now = now
        self.source.start(now)

    def poll(self, now: float) -> bool:
        self._now = now
        self.source.poll(now)
        if self._pending is None:
            return False
        if self._deadline is None:
            self._deadline = now + self.wait
        if now < self._deadline:
            return False
        value, self._pending, self._deadline = self._pending, None, None
        self._emit(value)
        return True

    def close(self):
        self._unsubscribe()
