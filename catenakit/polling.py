"""A simple cooperative polling engine."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Pollable(ABC):
    """An object that does a little work each time it is polled."""

    @abstractmethod
    def poll(self) -> None:
        """Do one step of work."""


class PollingEngine(Pollable):
    """Polls every registered object, in registration order."""

    def __init__(self) -> None:
        self._objects: list[Pollable] = []

    def register(self, obj: Pollable) -> None:
        """Add an object to the polling list."""
        self._objects.append(obj)

    def poll(self) -> None:
        """Poll each registered object once."""
        for obj in list(self._objects):
            obj.poll()

    def __len__(self) -> int:
        return len(self._objects)