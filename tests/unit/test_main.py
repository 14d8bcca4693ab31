import json
from pathlib import Path
from unittest.mock import patch

import pytest

from kidneyscan.analysis.models import FileDescriptor, MediaCategory
from kidneyscan.analysis.synthesizer import analyze
from kidneyscan.config.settings import Settings
from kidneyscan.main import main, run_session


class TestRunSession:
    async def test_returns_revealed_result(self, fast_settings: Settings) -> None:
        file = FileDescriptor("labs.csv", 92, MediaCategory.DOCUMENT)

        result = await run_session(fast_settings, file)

        assert result == analyze(file)


class TestMain:
    def test_prints_result_as_json(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CLOCK_SPEED", "20")
        path = tmp_path / "scan.png"
        path.write_bytes(b"\x00" * 92)

        with patch("kidneyscan.main.Log.configure"):
            exit_code = main([str(path)])

        out = capsys.readouterr().out
        payload = json.loads(out[out.index("{\n") :])
        assert exit_code == 0
        assert payload["is_image"] is True
        assert payload["parameters"] is None
        assert payload["has_swelling"] is True

    def test_usage_error_without_path(self) -> None:
        with patch("kidneyscan.main.Log.error") as mock_error:
            assert main([]) == 2
        mock_error.assert_called_once()

    def test_missing_file_is_logged_not_raised(self, tmp_path: Path) -> None:
        with patch("kidneyscan.main.Log.error") as mock_error:
            assert main([str(tmp_path / "absent.png")]) == 1
        assert "absent.png" in mock_error.call_args.args[0]

    def test_unsupported_type_is_logged_not_raised(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        with patch("kidneyscan.main.Log.error") as mock_error:
            assert main([str(path)]) == 1
        mock_error.assert_called_once()
