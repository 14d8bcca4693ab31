from kidneyscan.simulation.models import STARTING_ACCURACY, AlgorithmRunState, AlgorithmSpec


class AlgorithmSimulator:
    """Advances one algorithm's progress and accuracy a tick at a time.

    Progress climbs linearly to 100 over the algorithm's nominal duration while
    accuracy climbs from the starting floor to its target over the same number
    of ticks. The simulator holds no timer; the caller decides when a tick
    happens.
    """

    def __init__(
        self,
        spec: AlgorithmSpec,
        target_accuracy: float,
        tick_ms: int = 50,
    ) -> None:
        self._spec = spec
        self._target_accuracy = target_accuracy
        self._progress_increment = 100 * tick_ms / spec.duration_ms
        self._accuracy_increment = (
            (target_accuracy - STARTING_ACCURACY) * tick_ms / spec.duration_ms
        )
        self._state = AlgorithmRunState()

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def target_accuracy(self) -> float:
        return self._target_accuracy

    @property
    def state(self) -> AlgorithmRunState:
        return self._state

    def tick(self) -> bool:
        """Apply one tick.

        Returns:
            True only on the tick that completes the algorithm. Ticks after
            completion leave the state untouched and return False.
        """
        state = self._state
        if state.completed:
            return False
        state.progress = min(state.progress + self._progress_increment, 100.0)
        state.accuracy = min(state.accuracy + self._accuracy_increment, self._target_accuracy)
        if state.progress >= 100.0:
            state.completed = True
            return True
        return False


def ticks_to_complete(spec: AlgorithmSpec, tick_ms: int) -> int:
    """Number of ticks an algorithm needs before it reports completion."""
    simulator = AlgorithmSimulator(spec, STARTING_ACCURACY, tick_ms=tick_ms)
    ticks = 1
    while not simulator.tick():
        ticks += 1
    return ticks
