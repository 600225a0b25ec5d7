from __future__ import annotations

from functools import cached_property
from typing import Optional, Tuple


def parse_pathext(value: Optional[str]) -> Tuple[str, ...]:
	if not value:
		return ()
	exts = []
	for entry in value.split(";"):
		entry = entry.strip()
		if entry.startswith("."):
			entry = entry[1:]
		if entry:
			exts.append(entry)
	return tuple(exts)


class PathExtResolver:
	"""Ordered executable extensions from a PATHEXT-style value.

	Entries are returned without their leading dot. An absent value yields no
	extensions, so callers only try the bare name.
	"""

	def __init__(self, value: Optional[str]):
		self.value = value

	@cached_property
	def extensions(self) -> Tuple[str, ...]:
		return parse_pathext(self.value)
