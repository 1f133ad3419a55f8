"""Base class for tuning strategies."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from ..core import BaseReference


class TuningStrategy(ABC):
    """Abstract base class for tuning strategies.

    A strategy maps note numbers to frequency ratios relative to a shared
    BaseReference. Only `ratio` is required; `frequency` and `frequencies`
    are derived from it, and `format_ratio_display` defaults to no display.
    """

    mode = None

    def __init__(self, reference: Optional[BaseReference] = None):
        """
        Initialize strategy.

        Args:
            reference: Base reference to measure from. Pass the same object
                to several strategies to keep them in step.
        """
        self.reference = reference if reference is not None else BaseReference()

    @property
    def base_frequency(self) -> float:
        return self.reference.frequency

    @property
    def base_note(self) -> int:
        return self.reference.note

    @abstractmethod
    def ratio(self, note: int) -> float:
        """
        Frequency ratio of a note relative to the base reference.

        Args:
            note: Note number

        Returns:
            Positive ratio; exactly 1.0 for the base note
        """
        pass

    def frequency(self, note: int) -> float:
        """Frequency (Hz) of a note."""
        return self.reference.frequency * self.ratio(note)

    def frequencies(self, notes: Sequence[int]) -> Dict[int, float]:
        """Frequencies (Hz) for several notes, keyed by note number."""
        return {note: self.frequency(note) for note in notes}

    def format_ratio_display(self, notes: Sequence[int]) -> str:
        """Integer chord ratio for display, or "" when there is none."""
        return ""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_frequency={self.base_frequency}, "
            f"base_note={self.base_note})"
        )
