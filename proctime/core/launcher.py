from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from proctime.config import Config
from proctime.core.report import format_report
from proctime.core.runner import TimedProcessRunner
from proctime.core.splitter import split_invocation
from proctime.errors import PTUsageError


logger = logging.getLogger(__name__)


def launch(invocation: str, cfg: Optional[Config] = None, report_stream: Optional[TextIO] = None, runner: Optional[TimedProcessRunner] = None) -> int:
	"""Run the child named in ``invocation`` and return its exit code.

	The timing report goes to ``report_stream`` (stderr by default). Any
	failure before the report is written raises a ``PTError``.
	"""
	cfg = cfg or Config()
	split = split_invocation(invocation)
	if not split.found:
		raise PTUsageError()
	path = cfg.locator().resolve(split.executable_name)
	result = (runner or TimedProcessRunner()).run(path, split.child_command)
	stream = report_stream or sys.stderr
	stream.write(format_report(result.sample))
	stream.flush()
	return result.exit_code
