"""
Trace output and cosmetic pacing.

Every component reports what it does as human-readable lines.  Those
lines go through a ``Trace`` so the console demo can print them while
tests collect them in memory.  Pauses between lines are only there to
pace the demo and default to no-ops.
"""

import time
from abc import ABC, abstractmethod
from typing import List, Optional


class Trace(ABC):
    """Destination for trace lines."""

    @abstractmethod
    def record(self, text: str) -> None: ...


class ConsoleTrace(Trace):
    def record(self, text: str) -> None:
        print(text)


class MemoryTrace(Trace):
    """Keeps every recorded line, in order."""

    def __init__(self):
        self.lines: List[str] = []

    def record(self, text: str) -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def contains(self, fragment: str) -> bool:
        """True if any recorded line contains ``fragment``."""
        return any(fragment in line for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()


class Pacer:
    """Pause between trace lines. The base class never waits."""

    def pause(self, milliseconds: int) -> None:
        pass


class SleepPacer(Pacer):
    def pause(self, milliseconds: int) -> None:
        time.sleep(milliseconds / 1000.0)


CONSOLE = ConsoleTrace()
NO_PACING = Pacer()


def resolve_trace(trace: Optional[Trace]) -> Trace:
    return trace if trace is not None else CONSOLE


def resolve_pacer(pacer: Optional[Pacer]) -> Pacer:
    return pacer if pacer is not None else NO_PACING
