# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
standard_module_structure: conventional file layout of a root module.

A module should have `main.tf`, `README.md`, `variables.tf` and `outputs.tf`,
with every `variable` declared in `variables.tf` and every `output` in
`outputs.tf`. JSON-syntax files are treated as generated and exempt: a module
made only of JSON files gets no missing-file findings, and declarations in a
JSON file are never asked to move.
"""

from __future__ import annotations

import json
import os
from typing import Iterable, List

from modlint.core.diagnostics import Diagnostic, Severity
from modlint.core.span import Range
from modlint.host.protocol import Runner
from modlint.host.parser import is_json_filename
from modlint.host.schema import Block, BlockSchema, BodySchema
from .base import DefaultRule
from .context import ModuleContext

FILENAME_MAIN = "main.tf"
FILENAME_VARIABLES = "variables.tf"
FILENAME_OUTPUTS = "outputs.tf"
FILENAME_README = "README.md"

SCHEMA = BodySchema(
	blocks=(
		BlockSchema(type="variable", label_names=("name",), body=BodySchema()),
		BlockSchema(type="output", label_names=("name",), body=BodySchema()),
	)
)


def only_json(files: Iterable[str]) -> bool:
	"""True iff there is at least one file and every file has the `.json` extension."""
	names = list(files)
	return bool(names) and all(is_json_filename(name) for name in names)


def should_move(path: str, expected: str) -> bool:
	# json files are likely generated and conventional filenames do not apply
	if is_json_filename(path):
		return False
	return os.path.basename(path) != expected


class StandardModuleStructureRule(DefaultRule):
	"""Checks whether modules adhere to the standard module structure."""

	def name(self) -> str:
		return "standard_module_structure"

	def enabled(self) -> bool:
		return True

	def severity(self) -> Severity:
		return Severity.WARNING

	def check(self, runner: Runner) -> None:
		"""
		Emit issues for missing files and misplaced blocks of `runner`'s module.

		Host failures, including a failing `emit_issue`, propagate and stop the
		remaining emissions.
		"""
		ctx = ModuleContext.from_runner(runner, SCHEMA)
		for diag in self.evaluate(ctx):
			runner.emit_issue(self, diag.message, diag.range)

	def evaluate(self, ctx: ModuleContext) -> List[Diagnostic]:
		"""Return the findings for `ctx`: missing files, then variables, then outputs."""
		if not ctx.is_root:
			# Child modules are not evaluated.
			return []
		if not ctx.files:
			# Not a configuration directory.
			return []
		diags: List[Diagnostic] = []
		diags.extend(self._check_files(ctx))
		diags.extend(self._check_placement(ctx.blocks_of("variable"), FILENAME_VARIABLES))
		diags.extend(self._check_placement(ctx.blocks_of("output"), FILENAME_OUTPUTS))
		return diags

	def _diag(self, message: str, range: Range) -> Diagnostic:
		return Diagnostic(message=message, range=range, severity=self.severity(), rule=self.name())

	def _check_files(self, ctx: ModuleContext) -> List[Diagnostic]:
		if only_json(ctx.files):
			return []

		module_dir = os.path.dirname(sorted(ctx.files)[0])
		present = {os.path.basename(name) for name in ctx.files}
		has_variables = bool(ctx.blocks_of("variable"))
		has_outputs = bool(ctx.blocks_of("output"))

		missing: List[tuple[str, str]] = []
		if FILENAME_MAIN not in present:
			missing.append((FILENAME_MAIN, f"Module should include a {FILENAME_MAIN} file as the primary entrypoint"))
		if FILENAME_README not in present:
			missing.append(
				(
					FILENAME_README,
					f"Module should include a {FILENAME_README} file with a comprehensive description of the module",
				)
			)
		# A declared block elsewhere is reported by the placement checks instead.
		if FILENAME_VARIABLES not in present and not has_variables:
			missing.append((FILENAME_VARIABLES, f"Module should include an empty {FILENAME_VARIABLES} file"))
		if FILENAME_OUTPUTS not in present and not has_outputs:
			missing.append((FILENAME_OUTPUTS, f"Module should include an empty {FILENAME_OUTPUTS} file"))

		return [self._diag(msg, Range.at_start_of(os.path.join(module_dir, fname))) for fname, msg in missing]

	def _check_placement(self, blocks: Iterable[Block], expected: str) -> List[Diagnostic]:
		diags: List[Diagnostic] = []
		for block in blocks:
			filename = block.def_range.filename
			if should_move(filename, expected):
				diags.append(
					self._diag(
						f"{block.type} {json.dumps(block.name, ensure_ascii=False)} should be moved from {filename} to {expected}",
						block.def_range,
					)
				)
		return diags


__all__ = [
	"FILENAME_MAIN",
	"FILENAME_OUTPUTS",
	"FILENAME_README",
	"FILENAME_VARIABLES",
	"SCHEMA",
	"StandardModuleStructureRule",
	"only_json",
	"should_move",
]
