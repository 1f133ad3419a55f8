"""Equal temperament - the octave split into 12 equal steps."""

import numpy as np

from ..core.constants import SEMITONES_PER_OCTAVE
from .base import TuningStrategy
from .modes import TuningMode


class EqualTemperament(TuningStrategy):
    """12-tone equal temperament.

    Equal-tempered intervals are irrational, so there is no integer chord
    ratio to display.
    """

    mode = TuningMode.EQUAL

    def ratio(self, note: int) -> float:
        semitones = note - self.reference.note
        return float(np.power(2.0, semitones / SEMITONES_PER_OCTAVE))
