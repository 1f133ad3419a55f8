"""Exception types raised by the tuning engine."""


class TuningError(Exception):
    """Base class for tuning engine errors."""


class UnknownTuningModeError(TuningError, ValueError):
    """Raised when a tuning mode name is not recognised."""

    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Unknown tuning system: {mode!r}")


class NoteNotPlacedError(TuningError, KeyError):
    """Raised when a note is queried that the last recompute did not place."""

    def __init__(self, note: int):
        self.note = note
        super().__init__(note)

    def __str__(self) -> str:
        return (
            f"Note {self.note} has no lattice position; "
            "call recompute() with it in the active set first"
        )
