"""Harmonic Tuner - exact just-intonation ratios for sounding chords.

Architecture Layers:
    1. core/     - Base reference, note names, constants, errors
    2. lattice/  - Exact rational math over the 2-3-5 prime lattice
    3. tuning/   - Tuning strategies and the coordinator hosts talk to
"""

__version__ = "0.1.0"

# Core types
from .core import (
    BaseReference,
    TuningError,
    UnknownTuningModeError,
    NoteNotPlacedError,
)

# Tuning layer
from .tuning import (
    TuningMode,
    TuningStrategy,
    EqualTemperament,
    JustIntonation,
    AutoTuningTemperament,
    TuningCoordinator,
    TunerConfig,
    StaticInputSource,
)

__all__ = [
    # Core
    "BaseReference",
    "TuningError",
    "UnknownTuningModeError",
    "NoteNotPlacedError",
    # Tuning
    "TuningMode",
    "TuningStrategy",
    "EqualTemperament",
    "JustIntonation",
    "AutoTuningTemperament",
    "TuningCoordinator",
    "TunerConfig",
    "StaticInputSource",
]
