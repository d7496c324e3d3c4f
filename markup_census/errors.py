from __future__ import annotations

from typing import Optional


class CensusError(Exception):
	"""Base class for every error the census reports to its caller."""


class UsageError(CensusError):
	pass


class PathError(CensusError):
	def __init__(self, path: str) -> None:
		super().__init__(f'The provided path "{path}" does not exist or is not a directory.')
		self.path = path


class AnalysisError(CensusError):
	def __init__(self, path: str, reason: str) -> None:
		super().__init__(f"{path}: {reason}")
		self.path = path
		self.reason = reason


class ParseError(AnalysisError):
	def __init__(self, path: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
		where = f" at line {line}, column {column}" if line is not None else ""
		super().__init__(path, f"syntax error{where}")
		self.line = line
		self.column = column
