from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


TICKS_PER_MILLISECOND = 10_000


class ConsoleEvent(Enum):
	INTERRUPT = "interrupt"
	BREAK = "break"
	CLOSE = "close"
	LOGOFF = "logoff"
	SHUTDOWN = "shutdown"


@dataclass(frozen=True)
class Duration:
	"""A span of time counted in 100 ns ticks."""
	ticks: int

	@property
	def milliseconds(self) -> int:
		# Truncates, never rounds.
		return self.ticks // TICKS_PER_MILLISECOND

	def render(self) -> str:
		ms = self.milliseconds
		return f"{ms // 1000}.{ms % 1000:03d}"


@dataclass(frozen=True)
class TimingSample:
	creation: int
	exit: int
	kernel: int
	user: int

	@property
	def real(self) -> Duration:
		return Duration(self.exit - self.creation)

	@property
	def system(self) -> Duration:
		return Duration(self.kernel)

	@property
	def user_time(self) -> Duration:
		return Duration(self.user)


@dataclass(frozen=True)
class SplitCommand:
	child_command: str
	executable_name: str
	found: bool


@dataclass
class RunResult:
	sample: TimingSample
	exit_code: int
