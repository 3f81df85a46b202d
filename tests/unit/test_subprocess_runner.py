"""
Subprocess adapter tests.

Uses the running interpreter as the external program.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from src.components.icons import IconExportError
from src.components.icons.adapters import LocalDirectoryAdapter, SubprocessRunner


class TestSubprocessRunner:
    """Exit status handling."""

    def test_zero_exit_returns(self) -> None:
        SubprocessRunner().run([sys.executable, "-c", "pass"])

    def test_nonzero_exit_raises(self) -> None:
        argv = [sys.executable, "-c", "import sys; sys.stderr.write('nope'); sys.exit(3)"]

        with pytest.raises(IconExportError) as exc_info:
            SubprocessRunner().run(argv)

        assert exc_info.value.returncode == 3
        assert exc_info.value.stderr == "nope"
        assert exc_info.value.command == argv

    def test_missing_executable_raises(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "no-such-renderer")

        with pytest.raises(IconExportError) as exc_info:
            SubprocessRunner().run([missing, "a.svg", "b.png", "32:32"])

        assert exc_info.value.returncode is None
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_blocks_until_exit(self, tmp_path: Path) -> None:
        marker = tmp_path / "done"
        code = f"import time, pathlib; time.sleep(0.2); pathlib.Path({str(marker)!r}).touch()"

        SubprocessRunner().run([sys.executable, "-c", code])

        assert marker.exists()

    def test_undecodable_stdout_on_success(self) -> None:
        code = "import sys; sys.stdout.buffer.write(b'\\xff\\xfe ok'); sys.exit(0)"

        SubprocessRunner().run([sys.executable, "-c", code])

    def test_undecodable_stderr_on_failure(self) -> None:
        code = "import sys; sys.stderr.buffer.write(b'\\xff\\xfe bad'); sys.exit(4)"

        with pytest.raises(IconExportError) as exc_info:
            SubprocessRunner().run([sys.executable, "-c", code])

        assert exc_info.value.returncode == 4
        assert "bad" in exc_info.value.stderr


class TestLocalDirectoryAdapter:
    """Idempotent recursive directory creation."""

    def test_creates_nested(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "icons"
        LocalDirectoryAdapter().ensure_dir(target)
        assert target.is_dir()

    def test_existing_directory_is_fine(self, tmp_path: Path) -> None:
        adapter = LocalDirectoryAdapter()
        adapter.ensure_dir(tmp_path)
        adapter.ensure_dir(tmp_path)
        assert tmp_path.is_dir()
