from kidneyscan.analysis.fingerprint import char_code_sum
from kidneyscan.simulation.exceptions import UnknownAlgorithmError
from kidneyscan.simulation.models import AlgorithmSpec

MIN_TARGET_ACCURACY = 0.85
MAX_TARGET_ACCURACY = 0.99

ANALYSIS_ALGORITHMS: tuple[AlgorithmSpec, ...] = (
    AlgorithmSpec(
        name="Deep Neural Network Analysis",
        description="Processing tissue patterns through CNN",
        duration_ms=8000,
        base_accuracy=0.97,
    ),
    AlgorithmSpec(
        name="Random Forest Classification",
        description="Analyzing cellular structures",
        duration_ms=5000,
        base_accuracy=0.93,
    ),
    AlgorithmSpec(
        name="Support Vector Machine",
        description="Boundary detection and segmentation",
        duration_ms=6000,
        base_accuracy=0.91,
    ),
    AlgorithmSpec(
        name="Ensemble Learning Model",
        description="Combining multiple predictions",
        duration_ms=7000,
        base_accuracy=0.95,
    ),
    AlgorithmSpec(
        name="Feature Extraction Pipeline",
        description="Extracting key biomarkers",
        duration_ms=4000,
        base_accuracy=0.89,
    ),
)


class AlgorithmRoster:
    """Read-only ordered catalog of simulated algorithms."""

    def __init__(self, algorithms: tuple[AlgorithmSpec, ...] = ANALYSIS_ALGORITHMS) -> None:
        self._algorithms = algorithms
        self._by_name = {spec.name: spec for spec in algorithms}

    def list(self) -> tuple[AlgorithmSpec, ...]:
        return self._algorithms

    def get(self, name: str) -> AlgorithmSpec:
        spec = self._by_name.get(name)
        if spec is None:
            raise UnknownAlgorithmError(
                f"Unknown algorithm '{name}'. Choose from: {list(self._by_name)}"
            )
        return spec

    def max_duration_ms(self) -> int:
        return max(spec.duration_ms for spec in self._algorithms)

    @staticmethod
    def target_accuracy(file_name: str, spec: AlgorithmSpec) -> float:
        """Accuracy an algorithm converges to for a given file name.

        Hashes the character codes of the name alone. This is deliberately a
        different hash from the result fingerprint, which uses name length and
        size; the two are not expected to agree.
        """
        variation = ((char_code_sum(file_name) % 100) / 100) * 0.1 - 0.05
        accuracy = spec.base_accuracy + variation
        return min(max(accuracy, MIN_TARGET_ACCURACY), MAX_TARGET_ACCURACY)
