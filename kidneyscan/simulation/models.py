from dataclasses import dataclass

STARTING_ACCURACY = 0.76


@dataclass(frozen=True)
class AlgorithmSpec:
    """Catalog entry for one simulated analysis algorithm."""

    name: str
    description: str
    duration_ms: int
    base_accuracy: float


@dataclass
class AlgorithmRunState:
    """Live progress of one algorithm within a session."""

    progress: float = 0.0
    accuracy: float = STARTING_ACCURACY
    completed: bool = False
