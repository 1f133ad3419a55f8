"""Global constants for Harmonic Tuner."""

# Pitch names
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Lattice dimensions: position (e2, e3, e5) is 2^e2 * 3^e3 * 5^e5
PRIMES = (2, 3, 5)
ORIGIN = (0, 0, 0)

# Base reference defaults (middle C)
DEFAULT_BASE_FREQUENCY = 261.63
DEFAULT_BASE_NOTE = 60

# Equal temperament
SEMITONES_PER_OCTAVE = 12
A4_FREQUENCY = 440.0
A4_NOTE = 69

