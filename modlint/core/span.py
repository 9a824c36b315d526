# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source locations attached to diagnostics.

A Range names a file plus a start/end position. Positions are 1-based; the end
column is exclusive. Ranges synthesized for files that do not exist (e.g. a
missing `main.tf`) point at INITIAL_POS for both start and end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, order=True)
class Pos:
	"""A 1-based line/column position."""

	line: int = 1
	column: int = 1


INITIAL_POS = Pos(line=1, column=1)


@dataclass(frozen=True)
class Range:
	"""A span within a file (the file need not exist on disk)."""

	filename: str
	start: Pos = INITIAL_POS
	end: Pos = field(default=INITIAL_POS)

	@classmethod
	def at_start_of(cls, filename: str) -> "Range":
		"""Sentinel range pointing at the start of `filename`."""
		return cls(filename=filename, start=INITIAL_POS, end=INITIAL_POS)

	@classmethod
	def from_tokens(cls, filename: str, first: Any, last: Any) -> "Range":
		"""
		Build a range spanning two lark tokens (or anything exposing
		`line`/`column`/`end_line`/`end_column`).
		"""
		return cls(
			filename=filename,
			start=Pos(line=first.line, column=first.column),
			end=Pos(line=last.end_line, column=last.end_column),
		)

	def format_start(self) -> str:
		return f"{self.filename}:{self.start.line}:{self.start.column}"

	def to_dict(self) -> dict[str, Any]:
		return {
			"file": self.filename,
			"line": self.start.line,
			"column": self.start.column,
			"end_line": self.end.line,
			"end_column": self.end.column,
		}


__all__ = ["INITIAL_POS", "Pos", "Range"]
