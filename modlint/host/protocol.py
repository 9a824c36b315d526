# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Configuration host protocol consumed by rules.

Rules never read files themselves: they ask a Runner for the module path, the
file inventory and the blocks matching a schema, and report findings back
through `emit_issue`. Any of these calls may raise `HostError`; rules let it
propagate so the host can abort the evaluation of that module.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Mapping, Protocol

from modlint.core.span import Range
from .schema import BodyContent, BodySchema

if TYPE_CHECKING:
	from modlint.rules.base import Rule


class ExpandMode(enum.Enum):
	"""How far the host expands module calls while collecting content."""

	NONE = "none"
	EXPAND = "expand"


class ModulePath(Protocol):
	def is_root(self) -> bool:
		"""Return True for the module under evaluation, False for called modules."""
		...


class File(Protocol):
	"""A file handle; only its name matters to structure rules."""

	filename: str


class Runner(Protocol):
	def get_module_path(self) -> ModulePath:
		...

	def get_files(self) -> Mapping[str, File]:
		"""Return the module's files keyed by path relative to the working directory."""
		...

	def get_module_content(self, schema: BodySchema, *, expand_mode: ExpandMode = ExpandMode.EXPAND) -> BodyContent:
		"""
		Return blocks matching `schema` from every file in the module.

		With `ExpandMode.NONE` only blocks physically present in this module's
		files are returned; called modules are not entered.
		"""
		...

	def emit_issue(self, rule: "Rule", message: str, range: Range) -> None:
		...


__all__ = ["ExpandMode", "File", "ModulePath", "Runner"]
