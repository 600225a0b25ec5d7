from __future__ import annotations

import os
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, PrivateAttr

from proctime.core.locator import ExecutableLocator
from proctime.core.pathext import PathExtResolver


DEFAULT_LOG_LEVEL = "WARNING"


def _windows_search_dirs() -> List[str]:
	# SearchPath order in safe search mode: the launcher's directory, the
	# system directories, the Windows directory, then the current directory
	windir = os.getenv("SystemRoot") or os.getenv("windir") or "C:\\Windows"
	launcher_dir = os.path.dirname(os.path.abspath(sys.argv[0])) if sys.argv and sys.argv[0] else os.getcwd()
	return [
		launcher_dir,
		os.path.join(windir, "System32"),
		os.path.join(windir, "System"),
		windir,
		os.getcwd(),
	]


def _default_search_path() -> List[str]:
	dirs = [d for d in os.getenv("PATH", "").split(os.pathsep) if d]
	if sys.platform == "win32":
		dirs = _windows_search_dirs() + dirs
	return dirs


class Config(BaseModel):
	pathext: Optional[str] = Field(default_factory=lambda: os.getenv("PATHEXT"), description="';'-separated executable extensions")
	search_path: List[str] = Field(default_factory=_default_search_path)
	log_level: str = Field(default_factory=lambda: os.getenv("PROCTIME_LOG_LEVEL", DEFAULT_LOG_LEVEL))

	_resolver: Optional[PathExtResolver] = PrivateAttr(default=None)

	def extension_resolver(self) -> PathExtResolver:
		if self._resolver is None:
			self._resolver = PathExtResolver(self.pathext)
		return self._resolver

	def locator(self) -> ExecutableLocator:
		return ExecutableLocator(self.search_path, self.extension_resolver().extensions)
