from __future__ import annotations

import logging
import subprocess

from proctime.core.signals import interrupt_guard
from proctime.errors import PTLaunchError, PTStatusQueryError, PTTimingQueryError
from proctime.types import RunResult
from proctime.utils import proc as procutil


logger = logging.getLogger(__name__)


class TimedProcessRunner:
	"""Runs one child to completion and collects its times and exit code.

	Interrupt and break signals are absorbed for as long as the child runs.
	There is no timeout; the wait lasts as long as the child does.
	"""

	def run(self, resolved_path: str, child_command: str) -> RunResult:
		with interrupt_guard():
			started = procutil.monotonic_ticks()
			try:
				child = procutil.spawn(resolved_path, child_command)
			except OSError as e:
				raise PTLaunchError(procutil.LAUNCH_OPERATION, e) from e
			with child:
				logger.debug("Started %s as pid %d", resolved_path, child.pid)
				if procutil.IS_WINDOWS:
					result = self._wait_windows(child)
				else:
					result = self._wait_posix(child, started)
		logger.debug("Child exited with code %d", result.exit_code)
		return result

	def _wait_posix(self, child: subprocess.Popen, started: int) -> RunResult:
		try:
			sample, status = procutil.wait_posix(child, started)
		except OSError as e:
			raise PTTimingQueryError("wait4", e) from e
		try:
			child.returncode = procutil.exit_code_from_status(status)
		except ValueError as e:
			raise PTStatusQueryError("waitpid", OSError(None, str(e))) from e
		return RunResult(sample=sample, exit_code=child.returncode)

	def _wait_windows(self, child: subprocess.Popen) -> RunResult:
		try:
			exit_code = child.wait()
		except OSError as e:
			raise PTStatusQueryError("GetExitCodeProcess", e) from e
		try:
			sample = procutil.process_times_windows(child)
		except OSError as e:
			raise PTTimingQueryError("GetProcessTimes", e) from e
		return RunResult(sample=sample, exit_code=exit_code)
