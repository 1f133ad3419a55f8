"""Tuning layer - strategies that turn note numbers into frequencies.

- Equal temperament (closed-form 12-TET)
- Just intonation (fixed 5-limit lattice from the base note)
- Auto tuning temperament (nearest-distance lattice placement)
- Coordinator (mode selection, shared base reference, input sources)

Pipeline: active notes -> TuningCoordinator -> TuningStrategy -> frequencies / ratio
"""

from .modes import TuningMode
from .base import TuningStrategy
from .equal import EqualTemperament
from .just import JustIntonation
from .auto import AutoTuningTemperament
from .coordinator import (
    TuningCoordinator,
    TunerConfig,
    InputSource,
    StaticInputSource,
)

__all__ = [
    "TuningMode",
    "TuningStrategy",
    # Strategies
    "EqualTemperament",
    "JustIntonation",
    "AutoTuningTemperament",
    # Coordination
    "TuningCoordinator",
    "TunerConfig",
    "InputSource",
    "StaticInputSource",
]
