"""Core types and constants for Harmonic Tuner."""

from .reference import (
    BaseReference,
    note_name,
    parse_note_name,
    midi_to_freq,
)
from .errors import TuningError, UnknownTuningModeError, NoteNotPlacedError
from .constants import (
    PITCH_NAMES,
    PRIMES,
    ORIGIN,
    DEFAULT_BASE_FREQUENCY,
    DEFAULT_BASE_NOTE,
)

__all__ = [
    "BaseReference",
    "note_name",
    "parse_note_name",
    "midi_to_freq",
    "TuningError",
    "UnknownTuningModeError",
    "NoteNotPlacedError",
    "PITCH_NAMES",
    "PRIMES",
    "ORIGIN",
    "DEFAULT_BASE_FREQUENCY",
    "DEFAULT_BASE_NOTE",
]
