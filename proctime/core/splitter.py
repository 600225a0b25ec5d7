from __future__ import annotations

import logging
from typing import List

from proctime.types import SplitCommand


logger = logging.getLogger(__name__)

WHITESPACE = " \t"


def skip_word(text: str, pos: int = 0) -> int:
	"""Return the index just past the token starting at ``pos``.

	A token starting with a double quote runs to the closing quote, which is
	consumed. Any other token runs to the next whitespace character.
	"""
	n = len(text)
	if pos < n and text[pos] == '"':
		pos += 1
		while pos < n and text[pos] != '"':
			pos += 1
		if pos < n:
			pos += 1
	else:
		while pos < n and text[pos] not in WHITESPACE:
			pos += 1
	return pos


def _skip_whitespace(text: str, pos: int) -> int:
	while pos < len(text) and text[pos] in WHITESPACE:
		pos += 1
	return pos


def _unquote(token: str) -> str:
	if token.startswith('"'):
		token = token[1:]
		if token.endswith('"'):
			token = token[:-1]
	return token


def split_invocation(invocation: str) -> SplitCommand:
	start = _skip_whitespace(invocation, skip_word(invocation, _skip_whitespace(invocation, 0)))
	child_command = invocation[start:].rstrip(WHITESPACE)
	if not child_command:
		return SplitCommand(child_command="", executable_name="", found=False)

	name_end = skip_word(child_command)
	executable_name = _unquote(child_command[:name_end].rstrip(WHITESPACE))
	logger.debug("CommandLine=%r", invocation)
	logger.debug("ChildCommandLine=%r", child_command)
	logger.debug("ApplicationName=%r", executable_name)
	return SplitCommand(child_command=child_command, executable_name=executable_name, found=True)


def argv_from_command_line(command_line: str) -> List[str]:
	"""Split a command line into argv with the Windows C runtime rules.

	This is the inverse of ``subprocess.list2cmdline``.
	"""
	argv: List[str] = []
	arg: List[str] = []
	in_arg = False
	in_quotes = False
	i = 0
	n = len(command_line)
	while i < n:
		c = command_line[i]
		if c == "\\":
			j = i
			while j < n and command_line[j] == "\\":
				j += 1
			count = j - i
			in_arg = True
			if j < n and command_line[j] == '"':
				arg.append("\\" * (count // 2))
				if count % 2:
					arg.append('"')
					i = j + 1
				else:
					i = j
			else:
				arg.append("\\" * count)
				i = j
			continue
		if c == '"':
			in_arg = True
			if in_quotes and i + 1 < n and command_line[i + 1] == '"':
				# "" inside a quoted run is a literal quote
				arg.append('"')
				i += 2
				continue
			in_quotes = not in_quotes
			i += 1
			continue
		if c in WHITESPACE and not in_quotes:
			if in_arg:
				argv.append("".join(arg))
				arg = []
				in_arg = False
			i += 1
			continue
		arg.append(c)
		in_arg = True
		i += 1
	if in_arg:
		argv.append("".join(arg))
	return argv
