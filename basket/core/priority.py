from enum import IntEnum
from typing import Any, Dict


class Priority(IntEnum):
    LOWEST = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    HIGHEST = 4

    @property
    def label(self) -> str:
        return self.name

    @property
    def color(self) -> str:
        return PRIORITY_COLORS[self]

    def next(self) -> "Priority":
        """Cyclic successor: HIGHEST wraps back to LOWEST."""
        return Priority((self.value + 1) % len(Priority))

    @classmethod
    def coerce(cls, value: Any) -> "Priority":
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            return cls.MEDIUM


PRIORITY_COLORS: Dict[Priority, str] = {
    Priority.LOWEST: "#6B7280",
    Priority.LOW: "#3B82F6",
    Priority.MEDIUM: "#8B5CF6",
    Priority.HIGH: "#F59E0B",
    Priority.HIGHEST: "#EF4444",
}

COLUMN_COUNT = len(Priority)
