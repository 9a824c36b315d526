# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ModlintError(Exception):
	"""
	A structured, serializable error for modlint tooling.

	`reason_code` is stable and machine-readable; `message` is for humans.
	"""

	reason_code: str
	message: str
	path: str | None = None
	line: int | None = None
	column: int | None = None

	def __str__(self) -> str:
		return self.format_human()

	def to_dict(self) -> dict[str, Any]:
		return {
			"reason_code": self.reason_code,
			"message": self.message,
			"path": self.path,
			"line": self.line,
			"column": self.column,
		}

	def format_human(self) -> str:
		parts: list[str] = [f"[{self.reason_code}] {self.message}"]
		if self.path:
			loc = self.path
			if self.line is not None:
				loc += f":{self.line}"
				if self.column is not None:
					loc += f":{self.column}"
			parts.append(f"path={loc}")
		return " ".join(parts)


@dataclass(frozen=True)
class HostError(ModlintError):
	"""
	The configuration host could not provide module data or accept an issue.

	Always fatal to the current module evaluation.
	"""


@dataclass(frozen=True)
class ConfigError(ModlintError):
	"""The modlint configuration file is unreadable or invalid."""


__all__ = ["ConfigError", "HostError", "ModlintError"]
