from __future__ import annotations

from dataclasses import dataclass
from typing import List

from settlecash.model import Side


@dataclass(frozen=True)
class OrderingEvent:
    """A prepend that left a settlement sequence out of date order."""

    side: Side
    settlement_date_label: str
    next_label: str
    message: str


class EventRecorder:
    """Collect ordering events without side effects."""

    def __init__(self) -> None:
        self._events: List[OrderingEvent] = []

    def record(self, event: OrderingEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> list[OrderingEvent]:
        return self._events
