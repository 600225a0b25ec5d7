from __future__ import annotations

import signal
import subprocess
import sys
from pathlib import Path

import pytest


def require_posix() -> None:
    if sys.platform == "win32":
        pytest.skip("POSIX process semantics required")


def python_invocation(*code_lines: str) -> str:
    """Invocation string that runs the current interpreter with ``-c``."""
    return subprocess.list2cmdline(["proctime", sys.executable, "-c", "\n".join(code_lines)])


@pytest.fixture()
def make_executable(tmp_path: Path):
    def _make(name: str, directory: Path | None = None, mode: int = 0o755) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text("#!/bin/sh\nexit 0\n")
        path.chmod(mode)
        return path

    return _make


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("PATHEXT", "PROCTIME_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture()
def restore_sigint():
    previous = signal.getsignal(signal.SIGINT)
    try:
        yield previous
    finally:
        signal.signal(signal.SIGINT, previous)



@pytest.fixture()
def restore_sigquit():
    require_posix()
    previous = signal.getsignal(signal.SIGQUIT)
    try:
        yield previous
    finally:
        signal.signal(signal.SIGQUIT, previous)
