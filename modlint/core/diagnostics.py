# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Diagnostic records produced by rules.

A Diagnostic is produced once and never mutated; hosts receive them through
`Runner.emit_issue` (or collect them from `Rule.evaluate`).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from .span import Range


class Severity(str, enum.Enum):
	ERROR = "error"
	WARNING = "warning"
	NOTICE = "notice"

	def __str__(self) -> str:
		return self.value


@dataclass(frozen=True)
class Diagnostic:
	"""A rule finding: message, location and severity."""

	message: str
	range: Range
	severity: Severity = Severity.WARNING
	rule: str | None = None

	def format_human(self) -> str:
		suffix = f" ({self.rule})" if self.rule else ""
		return f"{self.range.format_start()}: {self.severity}: {self.message}{suffix}"

	def to_dict(self) -> dict[str, Any]:
		out: dict[str, Any] = {
			"rule": self.rule,
			"message": self.message,
			"severity": str(self.severity),
		}
		out.update(self.range.to_dict())
		return out


__all__ = ["Diagnostic", "Severity"]
