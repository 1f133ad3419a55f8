"""Base reference - the fixed point every tuning ratio is measured from."""

import re
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .constants import (
    A4_FREQUENCY,
    A4_NOTE,
    DEFAULT_BASE_FREQUENCY,
    DEFAULT_BASE_NOTE,
    PITCH_NAMES,
    SEMITONES_PER_OCTAVE,
)

_NOTE_NAME_RE = re.compile(r"^\s*([A-Ga-g])([#b]*)(-?\d+)\s*$")


def note_name(note: int) -> str:
    """Get note name (e.g., 'C4', 'A#3') for a MIDI note number."""
    octave = (note // SEMITONES_PER_OCTAVE) - 1
    name = PITCH_NAMES[note % SEMITONES_PER_OCTAVE]
    return f"{name}{octave}"


def parse_note_name(text: str) -> int:
    """
    Parse a note given as an integer or a pitch name.

    Accepts plain integers ("60") and scientific pitch names with any
    number of sharps or flats ("C4", "F#3", "Bb2"). C4 is 60.

    Raises:
        ValueError: If the text is neither form.
    """
    text = str(text).strip()
    try:
        return int(text)
    except ValueError:
        pass

    match = _NOTE_NAME_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid note: {text!r}")

    letter, accidentals, octave = match.groups()
    pitch_class = PITCH_NAMES.index(letter.upper())
    pitch_class += accidentals.count("#") - accidentals.count("b")
    return (int(octave) + 1) * SEMITONES_PER_OCTAVE + pitch_class


def midi_to_freq(note: int) -> float:
    """Convert MIDI note to its 12-TET A440 frequency (Hz)."""
    return A4_FREQUENCY * (2 ** ((note - A4_NOTE) / 12.0))


@dataclass
class BaseReference:
    """The (frequency, note) pair all ratios are relative to.

    The base note always maps to lattice position (0, 0, 0) and ratio 1.
    One instance is owned by a TuningCoordinator and shared by reference
    with each of its strategies, so updating it here is seen everywhere.
    """

    frequency: float = DEFAULT_BASE_FREQUENCY
    note: int = DEFAULT_BASE_NOTE

    def __post_init__(self):
        self._validate(self.frequency, self.note)
        self.frequency = float(self.frequency)
        self.note = int(self.note)

    @staticmethod
    def _validate(frequency: float, note: int) -> None:
        if isinstance(note, bool) or not isinstance(note, (int, np.integer)):
            raise TypeError(f"Base note must be an integer, got {note!r}")
        if not frequency > 0:
            raise ValueError(f"Base frequency must be positive, got {frequency!r}")

    @classmethod
    def from_note(cls, note: int) -> "BaseReference":
        """Create a reference tuned to the equal-tempered pitch of `note`."""
        return cls(frequency=midi_to_freq(note), note=note)

    def update(self, frequency: Optional[float] = None, note: Optional[int] = None) -> None:
        """Update one or both fields in place, validating before assigning."""
        new_frequency = self.frequency if frequency is None else frequency
        new_note = self.note if note is None else note
        self._validate(new_frequency, new_note)
        self.frequency = float(new_frequency)
        self.note = int(new_note)

    @property
    def note_name(self) -> str:
        return note_name(self.note)
