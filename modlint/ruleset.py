# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
The built-in rule set: every shipped rule plus the config-driven selection of
which ones run.
"""

from __future__ import annotations

from typing import List, Sequence

from modlint import __version__
from modlint.config import Config
from modlint.errors import ConfigError
from modlint.host.protocol import Runner
from modlint.rules import Rule, StandardModuleStructureRule


class RuleSet:
	def __init__(self, name: str, version: str, rules: Sequence[Rule]) -> None:
		self.name = name
		self.version = version
		self.rules: List[Rule] = list(rules)
		self._enabled: List[Rule] = [r for r in self.rules if r.enabled()]

	def rule_names(self) -> List[str]:
		return [r.name() for r in self.rules]

	def apply_config(self, config: Config) -> None:
		"""
		Select the rules to run.

		An explicit per-rule setting wins; otherwise a rule runs when it is
		enabled by default and `disabled_by_default` is not set.
		"""
		known = set(self.rule_names())
		unknown = sorted(set(config.rules) - known)
		if unknown:
			raise ConfigError(reason_code="CONFIG_UNKNOWN_RULE", message=f"unknown rule(s): {', '.join(unknown)}")
		enabled: List[Rule] = []
		for rule in self.rules:
			rule_cfg = config.rules.get(rule.name())
			if rule_cfg is not None:
				on = rule_cfg.enabled
			else:
				on = rule.enabled() and not config.disabled_by_default
			if on:
				enabled.append(rule)
		self._enabled = enabled

	def enabled_rules(self) -> List[Rule]:
		return list(self._enabled)

	def check(self, runner: Runner) -> None:
		for rule in self._enabled:
			rule.check(runner)


def builtin_ruleset() -> RuleSet:
	return RuleSet(name="modlint", version=__version__, rules=[StandardModuleStructureRule()])


__all__ = ["RuleSet", "builtin_ruleset"]
