from dataclasses import dataclass, field, replace
from enum import Enum

from kidneyscan.analysis.models import AnalysisResult, FileDescriptor
from kidneyscan.simulation.models import AlgorithmRunState


class SessionPhase(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    REVEALED = "revealed"


@dataclass(frozen=True)
class StatusStep:
    """Caption shown while analysis is in progress."""

    text: str
    subtext: str


STATUS_STEPS: tuple[StatusStep, ...] = (
    StatusStep("Preprocessing sample data...", "Preparing tissue analysis"),
    StatusStep("Analyzing cellular structure...", "Detecting abnormalities"),
    StatusStep("Running AI diagnosis...", "Applying deep learning models"),
    StatusStep("Generating comprehensive report...", "Finalizing analysis"),
)


@dataclass
class Session:
    """Mutable state of one analyze-and-reveal cycle.

    Owned and mutated exclusively by the SessionOrchestrator.
    """

    file: FileDescriptor
    generation: int
    run_states: dict[str, AlgorithmRunState]
    phase: SessionPhase = SessionPhase.ANALYZING
    step_index: int = 0
    overall_progress: float = 0.0
    completion_order: list[str] = field(default_factory=list)
    result: AnalysisResult | None = None

    @property
    def is_analyzing(self) -> bool:
        return self.phase is SessionPhase.ANALYZING

    def record_completion(self, algorithm_name: str) -> None:
        if algorithm_name not in self.completion_order:
            self.completion_order.append(algorithm_name)

    def reset_run_states(self) -> None:
        for name in self.run_states:
            self.run_states[name] = AlgorithmRunState()
        self.overall_progress = 0.0
        self.step_index = 0

    def snapshot(self) -> "SessionSnapshot":
        return SessionSnapshot(
            file=self.file,
            generation=self.generation,
            phase=self.phase,
            step_index=self.step_index,
            status=STATUS_STEPS[self.step_index],
            overall_progress=self.overall_progress,
            run_states={name: replace(state) for name, state in self.run_states.items()},
            completion_order=tuple(self.completion_order),
            result=self.result,
        )


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time copy of a Session for display."""

    file: FileDescriptor
    generation: int
    phase: SessionPhase
    step_index: int
    status: StatusStep
    overall_progress: float
    run_states: dict[str, AlgorithmRunState]
    completion_order: tuple[str, ...]
    result: AnalysisResult | None

    @property
    def is_analyzing(self) -> bool:
        return self.phase is SessionPhase.ANALYZING
