class SimulationError(Exception):
    """Base exception for all simulation-related errors."""


class UnknownAlgorithmError(SimulationError):
    """Raised when an algorithm name is not part of the roster."""
