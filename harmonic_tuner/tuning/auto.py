"""Auto tuning temperament - context-dependent just intonation.

Instead of measuring every note from the fixed base, each sounding note is
chained onto whichever already-placed note gives the harmonically simplest
interval. Placement is greedy:

1. Seed the lattice with the base note at the origin.
2. Over all (unplaced, placed) pairs, pick the pair whose interval has the
   smallest harmonic distance. Ties go to the first pair found, iterating
   unplaced notes in the outer loop.
3. Place the note at the placed note's position plus the interval's just
   intonation position.
4. After the first real placement the base note stops being a comparison
   point, so later notes link to sounding notes.
5. Drop the base from the result if it was not itself sounding.

Because of the tie-break, the chord shape can depend on input order.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..core import BaseReference, NoteNotPlacedError
from ..core.constants import ORIGIN
from ..lattice import (
    LatticePosition,
    distance,
    format_chord_ratio,
    integer_chord_ratio,
    position_sum,
    ratio_from_position,
)
from .base import TuningStrategy
from .just import JustIntonation
from .modes import TuningMode


class AutoTuningTemperament(TuningStrategy):
    """Dynamic tuning that places notes on the lattice by nearest distance.

    Usage is two-phase: `recompute(notes)` places a chord, then `ratio`
    and `frequency` read the placement. `frequencies` and
    `format_ratio_display` recompute for the notes they are given.
    """

    mode = TuningMode.AUTO

    def __init__(self, reference: Optional[BaseReference] = None):
        super().__init__(reference)
        self.just_intonation = JustIntonation(self.reference)
        self.primes = self.just_intonation.primes
        self.active_notes: List[int] = []
        self.positions: Dict[int, LatticePosition] = {}

    def recompute(self, notes: Sequence[int]) -> Dict[int, LatticePosition]:
        """
        Place a new active note set, replacing the cached placement.

        Args:
            notes: Sounding note numbers; duplicates are ignored

        Returns:
            The new note -> position mapping
        """
        self.active_notes = list(dict.fromkeys(notes))
        self.positions = self.positions_for(self.active_notes)
        return self.positions

    def reset(self) -> None:
        """Forget the cached placement."""
        self.active_notes = []
        self.positions = {}

    def ratio(self, note: int) -> float:
        """
        Ratio of a note from the last recompute.

        Raises:
            NoteNotPlacedError: If the note was not in the last recompute.
        """
        if note not in self.positions:
            raise NoteNotPlacedError(note)
        return ratio_from_position(self.positions[note], self.primes)

    def frequencies(self, notes: Sequence[int]) -> Dict[int, float]:
        self.recompute(notes)
        return super().frequencies(notes)

    def format_ratio_display(self, notes: Sequence[int]) -> str:
        if len(notes) <= 1:
            return ""
        positions = self.recompute(notes)
        return format_chord_ratio(integer_chord_ratio(positions.values(), self.primes))

    def harmonic_distance(self, diff: int) -> int:
        """Harmonic distance of an interval of `diff` semitones."""
        position = self.just_intonation.calc_position(diff + self.reference.note)
        return distance(position, self.primes)

    def positions_for(self, notes: Sequence[int]) -> Dict[int, LatticePosition]:
        """
        Compute lattice positions for a note set without touching the cache.

        Args:
            notes: Sounding note numbers

        Returns:
            Mapping of each note to its lattice position
        """
        notes = list(dict.fromkeys(notes))
        if not notes:
            return {}

        base_note = self.reference.note
        positions: Dict[int, LatticePosition] = {base_note: ORIGIN}
        to_compare = [base_note]
        remaining = [note for note in notes if note != base_note]
        base_removed = False

        while remaining:
            next_note, compare_note = self._next_pair(remaining, to_compare)

            semitones = next_note - compare_note
            interval = self.just_intonation.calc_position(semitones + base_note)
            positions[next_note] = position_sum(positions[compare_note], interval)

            if next_note != compare_note and not base_removed:
                to_compare.remove(base_note)
                base_removed = True

            remaining.remove(next_note)
            to_compare.append(next_note)

        if base_note not in notes:
            del positions[base_note]

        return positions

    def _next_pair(
        self, remaining: Sequence[int], to_compare: Sequence[int]
    ) -> Tuple[int, int]:
        """Find the (unplaced, placed) pair with the smallest harmonic distance."""
        best_distance = None
        best_pair = None

        for note in remaining:
            for other in to_compare:
                d = self.harmonic_distance(abs(note - other))
                if best_distance is None or d < best_distance:
                    best_distance = d
                    best_pair = (note, other)

        return best_pair
