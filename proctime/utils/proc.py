from __future__ import annotations

import os
import subprocess
import sys
import time
from typing import List, Optional, Tuple

from proctime.core.splitter import WHITESPACE, argv_from_command_line, skip_word
from proctime.types import TimingSample


IS_WINDOWS = sys.platform == "win32"
LAUNCH_OPERATION = "CreateProcess" if IS_WINDOWS else "execve"
TICKS_PER_SECOND = 10_000_000
NANOSECONDS_PER_TICK = 100


def monotonic_ticks() -> int:
	return time.monotonic_ns() // NANOSECONDS_PER_TICK


def seconds_to_ticks(seconds: float) -> int:
	return int(round(seconds * TICKS_PER_SECOND))


def read_invocation(argv: Optional[List[str]] = None) -> str:
	"""Return the raw command line, starting at the program's own name."""
	if argv is not None or not IS_WINDOWS:
		return subprocess.list2cmdline(sys.argv if argv is None else argv)
	import ctypes
	from ctypes import wintypes

	kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
	kernel32.GetCommandLineW.restype = wintypes.LPWSTR
	line = kernel32.GetCommandLineW()
	# Drop interpreter tokens ("python.exe -m", ...) that precede the program name
	pos = 0
	for _ in range(len(sys.orig_argv) - len(sys.argv)):
		pos = skip_word(line, pos)
		while pos < len(line) and line[pos] in WHITESPACE:
			pos += 1
	return line[pos:]


def spawn(executable: str, child_command: str) -> subprocess.Popen:
	# CreateProcess takes the command line as is; exec needs it split
	args = child_command if IS_WINDOWS else argv_from_command_line(child_command)
	return subprocess.Popen(args, executable=executable)


def wait_posix(proc: subprocess.Popen, started: int) -> Tuple[TimingSample, int]:
	"""Reap ``proc`` with wait4 and return its timing sample and raw wait status."""
	_, status, usage = os.wait4(proc.pid, 0)
	sample = TimingSample(
		creation=started,
		exit=monotonic_ticks(),
		kernel=seconds_to_ticks(usage.ru_stime),
		user=seconds_to_ticks(usage.ru_utime),
	)
	return sample, status


def exit_code_from_status(status: int) -> int:
	code = os.waitstatus_to_exitcode(status)
	if code < 0:
		# represent signals using the Bourne shell convention
		return 128 - code
	return code


def _filetime_ticks(ft) -> int:
	return (ft.dwHighDateTime << 32) | ft.dwLowDateTime


def process_times_windows(proc: subprocess.Popen) -> TimingSample:
	import ctypes
	from ctypes import wintypes

	kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
	times = [wintypes.FILETIME() for _ in range(4)]
	# Popen keeps the process handle open until it is garbage collected
	handle = wintypes.HANDLE(int(proc._handle))  # type: ignore[attr-defined]
	if not kernel32.GetProcessTimes(handle, *(ctypes.byref(ft) for ft in times)):
		raise ctypes.WinError(ctypes.get_last_error())
	creation, exited, kernel, user = (_filetime_ticks(ft) for ft in times)
	return TimingSample(creation=creation, exit=exited, kernel=kernel, user=user)
