"""Tuning mode selector."""

from enum import Enum
from typing import List, Union

from ..core.errors import UnknownTuningModeError


class TuningMode(Enum):
    """Available tuning strategies."""
    EQUAL = "equal"    # 12-tone equal temperament
    JUST = "just"      # Fixed 5-limit just intonation from the base note
    AUTO = "auto"      # Context-dependent lattice placement

    @classmethod
    def parse(cls, value: Union["TuningMode", str]) -> "TuningMode":
        """Resolve a mode or mode name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownTuningModeError(value)

    @classmethod
    def names(cls) -> List[str]:
        return [mode.value for mode in cls]
