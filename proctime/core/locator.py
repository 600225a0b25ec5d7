from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Sequence

from proctime.errors import PTResolutionError


logger = logging.getLogger(__name__)


def is_executable_file(path: str) -> bool:
	if not os.path.isfile(path):
		return False
	# Windows decides executability by extension, not permission bits
	return sys.platform == "win32" or os.access(path, os.X_OK)


def _has_directory(name: str) -> bool:
	return os.sep in name or (os.altsep is not None and os.altsep in name)


class ExecutableLocator:
	def __init__(self, search_path: Sequence[str], extensions: Sequence[str] = ()):
		self.search_path = list(search_path)
		self.extensions = list(extensions)

	def search(self, candidate: str) -> Optional[str]:
		"""Look up one file name, without trying any extension."""
		if not candidate:
			return None
		if _has_directory(candidate) or os.path.isabs(candidate):
			return os.path.abspath(candidate) if is_executable_file(candidate) else None
		for directory in self.search_path:
			path = os.path.join(directory, candidate)
			if is_executable_file(path):
				return os.path.abspath(path)
		return None

	def candidates(self, name: str) -> list[str]:
		return [name] + [f"{name}.{ext.lstrip('.')}" for ext in self.extensions]

	def resolve(self, name: str) -> str:
		if not name:
			raise PTResolutionError(name)
		for candidate in self.candidates(name):
			logger.debug("Searching for %r", candidate)
			found = self.search(candidate)
			if found:
				logger.debug("FinalApplicationName=%r", found)
				return found
		raise PTResolutionError(name)
