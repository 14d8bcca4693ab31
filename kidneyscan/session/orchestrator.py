import asyncio
from collections.abc import Coroutine
from typing import Any

from kidneyscan.analysis.models import AnalysisResult, FileDescriptor
from kidneyscan.analysis.synthesizer import analyze
from kidneyscan.config.settings import Settings
from kidneyscan.logging.logger import Log
from kidneyscan.session.exceptions import NoActiveSessionError, SessionSupersededError
from kidneyscan.session.models import STATUS_STEPS, Session, SessionPhase, SessionSnapshot
from kidneyscan.simulation.roster import AlgorithmRoster
from kidneyscan.simulation.simulator import AlgorithmSimulator


class SessionOrchestrator:
    """Runs one simulated analysis session at a time on the running event loop.

    A submission fans out into independent tasks: one per algorithm, an
    overall progress ticker, a status step cycler and a reveal timer. Only the
    reveal timer decides when the result is published.

    Every task belongs to a session generation. Submitting a new file cancels
    the previous generation's tasks, and each task re-checks its generation
    after every wait before it writes, so a tick that was already scheduled
    cannot leak into the next session.
    """

    def __init__(self, settings: Settings, roster: AlgorithmRoster | None = None) -> None:
        self._settings = settings
        self._roster = roster if roster is not None else AlgorithmRoster()
        self._generation = 0
        self._session: Session | None = None
        self._pending_result: AnalysisResult | None = None
        self._finished: asyncio.Event | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_analyzing(self) -> bool:
        return self._session is not None and self._session.is_analyzing

    @property
    def result(self) -> AnalysisResult | None:
        """Published result of the current session, None until revealed."""
        return self._session.result if self._session is not None else None

    @property
    def pending_tasks(self) -> frozenset[asyncio.Task[None]]:
        return frozenset(self._tasks)

    def snapshot(self) -> SessionSnapshot | None:
        return self._session.snapshot() if self._session is not None else None

    def analyze_file(self, file: FileDescriptor) -> SessionSnapshot:
        """Start a session for file, abandoning any session still running.

        Must be called from within a running event loop.
        """
        loop = asyncio.get_running_loop()
        self._abandon_current()

        self._generation += 1
        tick_ms = self._settings.tick_interval_ms
        simulators = [
            AlgorithmSimulator(
                spec,
                self._roster.target_accuracy(file.name, spec),
                tick_ms=tick_ms,
            )
            for spec in self._roster.list()
        ]
        session = Session(
            file=file,
            generation=self._generation,
            run_states={simulator.name: simulator.state for simulator in simulators},
        )
        self._session = session
        self._pending_result = analyze(file)
        self._finished = asyncio.Event()

        started_at = loop.time()
        window_ms = (
            self._settings.image_window_ms
            if file.is_image
            else self._settings.document_window_ms
        )
        reveal_ms = self._roster.max_duration_ms() + self._settings.reveal_grace_ms

        self._spawn(self._run_overall_progress(session, started_at, window_ms))
        self._spawn(self._run_step_cycle(session, started_at))
        for simulator in simulators:
            self._spawn(self._run_algorithm(session, simulator, started_at))
        self._spawn(self._reveal_after(session, started_at, reveal_ms))

        Log.info(
            f"Analyzing '{file.name}' ({file.byte_size} bytes, "
            f"{file.media_category.value}); reveal in {reveal_ms} ms",
            session=session.generation,
        )
        return session.snapshot()

    async def wait_for_result(self) -> AnalysisResult:
        """Wait until the current session reveals its result.

        Raises:
            NoActiveSessionError: if no file has been submitted.
            SessionSupersededError: if the awaited session is abandoned first.
        """
        session = self._session
        finished = self._finished
        if session is None or finished is None:
            raise NoActiveSessionError("No file has been submitted for analysis")
        await finished.wait()
        if session.result is None:
            raise SessionSupersededError(
                f"Session {session.generation} was abandoned before its result was revealed"
            )
        return session.result

    async def close(self) -> None:
        """Stop every outstanding task and return to idle."""
        tasks = list(self._tasks)
        self._abandon_current()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        if self._session is not None:
            self._session.phase = SessionPhase.IDLE

    def _abandon_current(self) -> None:
        session = self._session
        if session is not None and session.is_analyzing:
            Log.debug("Abandoning session before reveal", session=session.generation)
            session.phase = SessionPhase.IDLE
            session.reset_run_states()
        self._cancel_tasks()
        if self._finished is not None:
            self._finished.set()

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            Log.error(f"Session task failed: {task.exception()}")

    def _cancel_tasks(self, keep: asyncio.Task[Any] | None = None) -> None:
        for task in list(self._tasks):
            if task is not keep:
                task.cancel()

    def _is_current(self, session: Session) -> bool:
        return session.generation == self._generation and session.is_analyzing

    async def _sleep_until(self, started_at: float, elapsed_ms: float) -> None:
        # Deadlines are absolute so per-tick overhead never accumulates.
        loop = asyncio.get_running_loop()
        deadline = started_at + elapsed_ms / 1000 / self._settings.clock_speed
        await asyncio.sleep(max(0.0, deadline - loop.time()))

    async def _run_algorithm(
        self,
        session: Session,
        simulator: AlgorithmSimulator,
        started_at: float,
    ) -> None:
        tick_ms = self._settings.tick_interval_ms
        ticks = 0
        while not simulator.state.completed:
            ticks += 1
            await self._sleep_until(started_at, ticks * tick_ms)
            if not self._is_current(session):
                return
            if simulator.tick():
                session.record_completion(simulator.name)
                Log.info(
                    f"{simulator.name} completed at {simulator.state.accuracy:.1%} accuracy "
                    f"(target {simulator.target_accuracy:.1%})",
                    session=session.generation,
                )

    async def _run_overall_progress(
        self,
        session: Session,
        started_at: float,
        window_ms: int,
    ) -> None:
        tick_ms = self._settings.tick_interval_ms
        increment = 100 / (window_ms / tick_ms)
        ticks = 0
        while session.overall_progress < 100:
            ticks += 1
            await self._sleep_until(started_at, ticks * tick_ms)
            if not self._is_current(session):
                return
            session.overall_progress = min(session.overall_progress + increment, 100.0)

    async def _run_step_cycle(self, session: Session, started_at: float) -> None:
        step_ms = self._settings.step_interval_ms
        cycles = 0
        while True:
            cycles += 1
            await self._sleep_until(started_at, cycles * step_ms)
            if not self._is_current(session):
                return
            session.step_index = (session.step_index + 1) % len(STATUS_STEPS)

    async def _reveal_after(self, session: Session, started_at: float, reveal_ms: int) -> None:
        await self._sleep_until(started_at, reveal_ms)
        if not self._is_current(session):
            return
        self._cancel_tasks(keep=asyncio.current_task())
        session.result = self._pending_result
        session.phase = SessionPhase.REVEALED
        session.reset_run_states()
        if self._finished is not None:
            self._finished.set()
        Log.info(
            f"Result revealed; completion order: {', '.join(session.completion_order)}",
            session=session.generation,
        )
