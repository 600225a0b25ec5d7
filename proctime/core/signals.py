from __future__ import annotations

import logging
import signal
from contextlib import contextmanager
from typing import Dict, Iterator

from proctime.errors import PTSignalSetupError
from proctime.types import ConsoleEvent


logger = logging.getLogger(__name__)

_HANDLED_EVENTS = frozenset({ConsoleEvent.INTERRUPT, ConsoleEvent.BREAK})


def console_disposition(event: ConsoleEvent) -> bool:
	"""True when the launcher absorbs ``event`` instead of taking the default action."""
	return event in _HANDLED_EVENTS


def signal_events() -> Dict[int, ConsoleEvent]:
	events = {signal.SIGINT: ConsoleEvent.INTERRUPT}
	if hasattr(signal, "SIGBREAK"):
		events[signal.SIGBREAK] = ConsoleEvent.BREAK
	elif hasattr(signal, "SIGQUIT"):
		# Ctrl-\ is the POSIX keyboard break
		events[signal.SIGQUIT] = ConsoleEvent.BREAK
	return events


class InterruptGuard:
	"""Keeps interrupt and break signals from killing the launcher.

	The child shares the console or process group and gets those signals
	from the OS directly, so nothing is forwarded to it here. Termination
	signals keep their default disposition.
	"""

	def __init__(self):
		self.interrupted = False
		self._previous: Dict[int, object] = {}

	def _handler(self, signum, frame) -> None:
		self.interrupted = True

	def install(self) -> None:
		for signum, event in signal_events().items():
			if not console_disposition(event):
				continue
			try:
				self._previous[signum] = signal.signal(signum, self._handler)
			except (OSError, ValueError) as e:
				self.restore()
				err = e if isinstance(e, OSError) else OSError(None, str(e))
				raise PTSignalSetupError("signal", err) from e

	def restore(self) -> None:
		while self._previous:
			signum, previous = self._previous.popitem()
			# None means the handler was not installed from Python
			signal.signal(signum, signal.SIG_DFL if previous is None else previous)


@contextmanager
def interrupt_guard() -> Iterator[InterruptGuard]:
	guard = InterruptGuard()
	guard.install()
	try:
		yield guard
	finally:
		guard.restore()
		if guard.interrupted:
			logger.debug("Absorbed an interrupt while the child ran")
