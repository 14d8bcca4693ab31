import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

from kidneyscan.analysis import AnalysisResult, FileDescriptor
from kidneyscan.config.settings import Settings
from kidneyscan.intake.exceptions import IntakeError
from kidneyscan.intake.file_loader import FileLoader
from kidneyscan.logging.logger import Log
from kidneyscan.session.orchestrator import SessionOrchestrator


async def run_session(settings: Settings, file: FileDescriptor) -> AnalysisResult:
    """Run one session to its reveal, logging a progress line per status step."""
    orchestrator = SessionOrchestrator(settings)
    orchestrator.analyze_file(file)
    waiter = asyncio.create_task(orchestrator.wait_for_result())
    poll_seconds = settings.step_interval_ms / 1000 / settings.clock_speed
    try:
        while not waiter.done():
            snapshot = orchestrator.snapshot()
            if snapshot is not None and snapshot.is_analyzing:
                done = len(snapshot.completion_order)
                Log.info(
                    f"{snapshot.status.text} {snapshot.overall_progress:.0f}% "
                    f"({done}/{len(snapshot.run_states)} algorithms complete)",
                    session=snapshot.generation,
                )
            await asyncio.wait({waiter}, timeout=poll_seconds)
        return waiter.result()
    finally:
        await orchestrator.close()


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> describe file -> run session -> print result."""
    args = sys.argv[1:] if argv is None else argv
    settings = Settings()
    Log.configure(settings.log_level)

    if len(args) != 1:
        Log.error("Usage: kidneyscan <file>")
        return 2

    try:
        file = FileLoader().describe(Path(args[0]))
    except (FileNotFoundError, IntakeError) as exc:
        Log.error(f"Cannot analyze '{args[0]}': {exc}")
        return 1

    result = asyncio.run(run_session(settings, file))
    print(json.dumps(asdict(result), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
