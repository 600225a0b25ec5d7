from proctime.config import Config
from proctime.core.launcher import launch
from proctime.core.locator import ExecutableLocator
from proctime.core.pathext import PathExtResolver
from proctime.core.report import format_report
from proctime.core.runner import TimedProcessRunner
from proctime.core.splitter import split_invocation
from proctime.types import Duration, RunResult, TimingSample

__all__ = [
	"Config",
	"launch",
	"ExecutableLocator",
	"PathExtResolver",
	"format_report",
	"TimedProcessRunner",
	"split_invocation",
	"Duration",
	"RunResult",
	"TimingSample",
]
