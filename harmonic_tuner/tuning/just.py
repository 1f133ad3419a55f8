"""Just intonation - fixed 5-limit ratios measured from the base note."""

from typing import Dict, Sequence

from ..core.constants import PRIMES, SEMITONES_PER_OCTAVE
from ..lattice import (
    LatticePosition,
    format_chord_ratio,
    integer_chord_ratio,
    position_sum,
    ratio_from_position,
)
from .base import TuningStrategy
from .modes import TuningMode


class JustIntonation(TuningStrategy):
    """Just intonation over the 2-3-5 prime lattice.

    Each pitch class above the base note has a fixed lattice position
    (e2, e3, e5); octaves add to the first component.
    """

    mode = TuningMode.JUST

    # Pitch class offset from the base -> lattice position
    PITCH_CLASS_POSITIONS: Dict[int, LatticePosition] = {
        0: (0, 0, 0),     # 1/1   unison
        1: (4, -1, -1),   # 16/15 minor second
        2: (-3, 2, 0),    # 9/8   major second
        3: (1, 1, -1),    # 6/5   minor third
        4: (-2, 0, 1),    # 5/4   major third
        5: (2, -1, 0),    # 4/3   perfect fourth
        6: (6, -2, -1),   # 64/45 augmented fourth
        7: (-1, 1, 0),    # 3/2   perfect fifth
        8: (3, 0, -1),    # 8/5   minor sixth
        9: (0, -1, 1),    # 5/3   major sixth
        10: (4, -2, 0),   # 16/9  minor seventh
        11: (-3, 1, 1),   # 15/8  major seventh
    }

    primes = PRIMES

    def calc_position(self, note: int) -> LatticePosition:
        """
        Lattice position of a note relative to the base note.

        Floor division keeps octaves correct below the base: one semitone
        under the base is octave -1, pitch class 11.
        """
        semitones = note - self.reference.note
        octave, offset = divmod(semitones, SEMITONES_PER_OCTAVE)
        return position_sum((octave, 0, 0), self.PITCH_CLASS_POSITIONS[offset])

    def positions(self, notes: Sequence[int]) -> Dict[int, LatticePosition]:
        """Lattice positions for several notes, keyed by note number."""
        return {note: self.calc_position(note) for note in notes}

    def ratio(self, note: int) -> float:
        return ratio_from_position(self.calc_position(note), self.primes)

    def format_ratio_display(self, notes: Sequence[int]) -> str:
        if len(notes) <= 1:
            return ""
        positions = [self.calc_position(note) for note in notes]
        return format_chord_ratio(integer_chord_ratio(positions, self.primes))
