from __future__ import annotations


class PTError(Exception):
	exit_code = 1


class PTUsageError(PTError):
	def __init__(self, program: str = "proctime"):
		super().__init__(f"Usage: {program} <command>")


class PTResolutionError(PTError):
	def __init__(self, name: str):
		super().__init__(f"`{name}' not found.")
		self.name = name


class PTOSError(PTError):
	def __init__(self, operation: str, error: OSError):
		reason = error.strerror or str(error)
		super().__init__(f"{operation} failed: {reason}")
		self.operation = operation
		self.errno = error.errno


class PTSignalSetupError(PTOSError):
	pass


class PTLaunchError(PTOSError):
	pass


class PTTimingQueryError(PTOSError):
	pass


class PTStatusQueryError(PTOSError):
	pass
