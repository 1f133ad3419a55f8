"""Tuning coordinator - the engine's entry point for host applications.

Holds the selected tuning strategy and the single BaseReference shared by
all strategies. Hosts (audio, input devices, displays) call
`frequencies_for` and `ratio_display_for` with the current active notes.
"""

import warnings
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Union

from ..core import BaseReference, UnknownTuningModeError
from ..core.constants import DEFAULT_BASE_FREQUENCY, DEFAULT_BASE_NOTE
from .auto import AutoTuningTemperament
from .base import TuningStrategy
from .equal import EqualTemperament
from .just import JustIntonation
from .modes import TuningMode


@dataclass
class TunerConfig:
    """Configuration for a TuningCoordinator.

    Attributes:
        base_frequency: Frequency of the base note in Hz (default: 261.63)
        base_note: Note number that sounds at base_frequency (default: 60)
        mode: Initial tuning mode (default: auto)
    """

    base_frequency: float = DEFAULT_BASE_FREQUENCY
    base_note: int = DEFAULT_BASE_NOTE
    mode: Union[TuningMode, str] = TuningMode.AUTO


class InputSource(Protocol):
    """Anything that can report its currently held notes."""

    def get_active_notes(self) -> Sequence[int]:
        ...


class StaticInputSource:
    """List-backed input source."""

    def __init__(self, notes: Optional[Iterable[int]] = None):
        self.notes: List[int] = list(notes or [])

    def set_notes(self, notes: Iterable[int]) -> None:
        self.notes = list(notes)

    def get_active_notes(self) -> List[int]:
        return list(self.notes)


class TuningCoordinator:
    """Selects a tuning strategy and forwards note queries to it."""

    def __init__(
        self,
        base_frequency: float = DEFAULT_BASE_FREQUENCY,
        base_note: int = DEFAULT_BASE_NOTE,
        mode: Union[TuningMode, str] = TuningMode.AUTO,
        config: Optional[TunerConfig] = None,
    ):
        """Initialize TuningCoordinator.

        Args:
            base_frequency: Frequency of the base note in Hz
            base_note: Note number that sounds at base_frequency
            mode: Initial tuning mode
            config: Optional TunerConfig, overrides the other arguments
                and is kept in step with later mode and base changes

        Raises:
            UnknownTuningModeError: If the initial mode is not recognised
        """
        if config is not None:
            self.config = config
        else:
            self.config = TunerConfig(
                base_frequency=base_frequency,
                base_note=base_note,
                mode=mode,
            )

        self._reference = BaseReference(
            frequency=self.config.base_frequency,
            note=self.config.base_note,
        )
        self._strategies: Dict[TuningMode, TuningStrategy] = {
            TuningMode.EQUAL: EqualTemperament(self._reference),
            TuningMode.JUST: JustIntonation(self._reference),
            TuningMode.AUTO: AutoTuningTemperament(self._reference),
        }
        self._mode = TuningMode.parse(self.config.mode)
        self.config.mode = self._mode
        self._input_sources: List[InputSource] = []

    @property
    def mode(self) -> TuningMode:
        return self._mode

    @property
    def reference(self) -> BaseReference:
        return self._reference

    @property
    def strategy(self) -> TuningStrategy:
        """The currently selected strategy."""
        return self._strategies[self._mode]

    def get_strategy(self, mode: Union[TuningMode, str]) -> TuningStrategy:
        return self._strategies[TuningMode.parse(mode)]

    def set_tuning_mode(self, mode: Union[TuningMode, str]) -> bool:
        """
        Switch the active strategy.

        An unknown mode is reported with a warning and the previous mode is
        kept.

        Returns:
            True if the mode was changed, False if it was rejected
        """
        try:
            self._mode = TuningMode.parse(mode)
        except UnknownTuningModeError as e:
            warnings.warn(f"{e}; keeping '{self._mode.value}'", stacklevel=2)
            return False
        self.config.mode = self._mode
        return True

    def set_base_reference(
        self,
        frequency: Optional[float] = None,
        note: Optional[int] = None,
    ) -> None:
        """
        Update the base frequency, base note, or both.

        All strategies share the reference, so a later mode switch sees the
        new values. The auto-tuning placement is discarded because it was
        measured from the old base.
        """
        self._reference.update(frequency=frequency, note=note)
        self.config.base_frequency = self._reference.frequency
        self.config.base_note = self._reference.note
        self._strategies[TuningMode.AUTO].reset()

    def frequencies_for(self, active_notes: Sequence[int]) -> Dict[int, float]:
        """Frequencies (Hz) of the active notes under the current tuning."""
        return self.strategy.frequencies(list(active_notes))

    def ratio_display_for(self, active_notes: Sequence[int]) -> str:
        """Integer chord ratio of the active notes, e.g. "4 : 5 : 6 (60)"."""
        return self.strategy.format_ratio_display(list(active_notes))

    # Input sources

    def add_input_source(self, source: InputSource) -> None:
        """Register an object reporting held notes via get_active_notes()."""
        self._input_sources.append(source)

    def active_notes(self) -> List[int]:
        """Notes held across all input sources, first occurrence wins."""
        notes: List[int] = []
        for source in self._input_sources:
            notes.extend(source.get_active_notes())
        return list(dict.fromkeys(notes))

    def current_frequencies(self) -> Dict[int, float]:
        return self.frequencies_for(self.active_notes())

    def current_ratio_display(self) -> str:
        return self.ratio_display_for(self.active_notes())
