from kidneyscan.analysis.models import FileDescriptor, MediaCategory
from kidneyscan.session.models import STATUS_STEPS, Session, SessionPhase
from kidneyscan.simulation.models import AlgorithmRunState


def _make_session() -> Session:
    return Session(
        file=FileDescriptor("scan.png", 92, MediaCategory.IMAGE),
        generation=3,
        run_states={"A": AlgorithmRunState(), "B": AlgorithmRunState()},
    )


class TestCompletionOrder:
    def test_appends_in_order(self) -> None:
        session = _make_session()
        session.record_completion("B")
        session.record_completion("A")
        assert session.completion_order == ["B", "A"]

    def test_ignores_duplicates(self) -> None:
        session = _make_session()
        session.record_completion("A")
        session.record_completion("A")
        assert session.completion_order == ["A"]


class TestReset:
    def test_restores_start_values(self) -> None:
        session = _make_session()
        session.run_states["A"].progress = 100.0
        session.run_states["A"].accuracy = 0.95
        session.run_states["A"].completed = True
        session.overall_progress = 42.0
        session.step_index = 3

        session.reset_run_states()

        assert session.run_states["A"] == AlgorithmRunState(0.0, 0.76, False)
        assert session.overall_progress == 0.0
        assert session.step_index == 0


class TestSnapshot:
    def test_copies_run_states(self) -> None:
        session = _make_session()
        snapshot = session.snapshot()

        session.run_states["A"].progress = 50.0
        session.record_completion("A")

        assert snapshot.run_states["A"].progress == 0.0
        assert snapshot.completion_order == ()

    def test_exposes_caption_for_step(self) -> None:
        session = _make_session()
        session.step_index = 1

        snapshot = session.snapshot()

        assert snapshot.status is STATUS_STEPS[1]
        assert snapshot.phase is SessionPhase.ANALYZING
        assert snapshot.is_analyzing is True
