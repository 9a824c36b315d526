# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from modlint import __version__
from modlint.config import load_config
from modlint.core.diagnostics import Diagnostic
from modlint.errors import ConfigError, HostError, ModlintError
from modlint.host.runner import load_module_dir
from modlint.ruleset import RuleSet, builtin_ruleset

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_ISSUES = 2


def _log(message: str) -> None:
	print(f"[modlint] {message}", file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="modlint", description="Check the standard structure of configuration modules")
	p.add_argument("modules", nargs="*", type=Path, default=[Path(".")], help="Module directories (default: .)")
	p.add_argument(
		"--config",
		type=Path,
		default=None,
		help="Path to config file (default: ./.modlint.json when present)",
	)
	p.add_argument("--json", action="store_true", help="Emit diagnostics and errors as one JSON object on stdout")
	p.add_argument("--verbose", action="store_true", help="Log progress to stderr")
	p.add_argument("--version", action="version", version=f"modlint {__version__}")
	return p


def run_module(ruleset: RuleSet, module_dir: Path) -> List[Diagnostic]:
	"""Evaluate one module directory as a root module. HostError propagates."""
	runner = load_module_dir(module_dir)
	ruleset.check(runner)
	return runner.issues


def main(argv: list[str] | None = None) -> int:
	"""
	Evaluate each module directory independently.

	Exit codes: 0 no issues, 2 issues found, 1 when the config or any module
	could not be evaluated (modules that could be evaluated are still reported).
	"""
	args = _build_parser().parse_args(argv)

	ruleset = builtin_ruleset()
	try:
		ruleset.apply_config(load_config(args.config))
	except ConfigError as err:
		if args.json:
			print(json.dumps({"exit_code": EXIT_ERROR, "diagnostics": [], "errors": [err.to_dict()]}))
		else:
			_log(err.format_human())
		return EXIT_ERROR

	if args.verbose:
		names = ", ".join(r.name() for r in ruleset.enabled_rules()) or "(none)"
		_log(f"{ruleset.name} {ruleset.version}: enabled rules: {names}")

	diagnostics: List[Diagnostic] = []
	errors: List[ModlintError] = []
	for module_dir in args.modules:
		if args.verbose:
			_log(f"checking module {module_dir}")
		try:
			found = run_module(ruleset, module_dir)
		except HostError as err:
			errors.append(err)
			if not args.json:
				_log(f"{module_dir}: {err.format_human()}")
			continue
		if args.verbose:
			_log(f"{module_dir}: {len(found)} issue(s)")
		diagnostics.extend(found)

	if errors:
		exit_code = EXIT_ERROR
	elif diagnostics:
		exit_code = EXIT_ISSUES
	else:
		exit_code = EXIT_OK

	if args.json:
		payload = {
			"exit_code": exit_code,
			"diagnostics": [d.to_dict() for d in diagnostics],
			"errors": [e.to_dict() for e in errors],
		}
		print(json.dumps(payload))
	else:
		for d in diagnostics:
			print(d.format_human(), file=sys.stderr)
	return exit_code


__all__ = ["main", "run_module"]
