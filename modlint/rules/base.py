# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import abc
from typing import Protocol

from modlint.core.diagnostics import Severity
from modlint.host.protocol import Runner


class Rule(Protocol):
	def name(self) -> str:
		"""Stable rule identifier used in output and configuration."""
		...

	def enabled(self) -> bool:
		"""Whether the rule runs when configuration says nothing about it."""
		...

	def severity(self) -> Severity:
		...

	def check(self, runner: Runner) -> None:
		"""Evaluate the runner's module, emitting issues through the runner."""
		...


class DefaultRule(abc.ABC):
	"""Defaults shared by rules: enabled, warning severity."""

	@abc.abstractmethod
	def name(self) -> str:
		...

	def enabled(self) -> bool:
		return True

	def severity(self) -> Severity:
		return Severity.WARNING

	@abc.abstractmethod
	def check(self, runner: Runner) -> None:
		...

	def __repr__(self) -> str:
		return f"{type(self).__name__}()"


__all__ = ["DefaultRule", "Rule"]
