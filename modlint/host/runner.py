# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Bundled configuration host.

`ModuleRunner` serves one module from an in-memory mapping of file paths to
source text; `load_module_dir` builds one from a directory on disk. Emitted
issues are collected on the runner in emission order.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Mapping

from modlint.core.diagnostics import Diagnostic
from modlint.core.span import Range
from modlint.errors import HostError
from .parser import is_json_filename, parse_blocks
from .protocol import ExpandMode
from .schema import Blocks, BodyContent, BodySchema

if TYPE_CHECKING:
	from modlint.rules.base import Rule

CONFIG_SUFFIXES = (".tf", ".tf.json")
DOC_FILENAMES = ("README.md",)


@dataclass(frozen=True)
class ModulePath:
	dir: str
	root: bool = True

	def is_root(self) -> bool:
		return self.root


@dataclass(frozen=True)
class File:
	filename: str
	source: str

	@property
	def parsed(self) -> bool:
		"""Whether the host reads declarations from this file."""
		return self.filename.endswith(".tf") or is_json_filename(self.filename)


class ModuleRunner:
	"""In-memory Runner for a single module."""

	def __init__(self, files: Mapping[str, str], *, root: bool = True, module_dir: str | None = None) -> None:
		self._files: Dict[str, File] = {name: File(filename=name, source=src) for name, src in files.items()}
		if module_dir is None:
			module_dir = os.path.dirname(next(iter(files), "")) or "."
		self._path = ModulePath(dir=module_dir, root=root)
		self.issues: List[Diagnostic] = []

	def get_module_path(self) -> ModulePath:
		return self._path

	def get_files(self) -> Dict[str, File]:
		return dict(self._files)

	def get_module_content(self, schema: BodySchema, *, expand_mode: ExpandMode = ExpandMode.EXPAND) -> BodyContent:
		# Module calls are never entered here; only this module's own files are
		# read, which is what ExpandMode.NONE asks for.
		blocks = Blocks()
		for name in sorted(self._files):
			f = self._files[name]
			if not f.parsed:
				continue
			blocks.extend(parse_blocks(name, f.source, schema))
		return BodyContent(blocks=blocks)

	def emit_issue(self, rule: "Rule", message: str, range: Range) -> None:
		self.issues.append(Diagnostic(message=message, range=range, severity=rule.severity(), rule=rule.name()))


def _is_module_file(path: Path) -> bool:
	if not path.is_file():
		return False
	return path.name.endswith(CONFIG_SUFFIXES) or path.name in DOC_FILENAMES


def load_module_dir(module_dir: Path | str) -> ModuleRunner:
	"""
	Build a ModuleRunner for the files directly inside `module_dir`.

	File keys keep the directory as given (e.g. `infra/main.tf`); `.` yields
	bare filenames. Subdirectories (child modules) are not read, and
	documentation files are inventoried with empty content.
	"""
	base = Path(module_dir)
	if not base.is_dir():
		raise HostError(reason_code="MODULE_NOT_FOUND", message=f"module directory not found: {base}", path=str(base))
	files: Dict[str, str] = {}
	for path in sorted(base.iterdir()):
		if not _is_module_file(path):
			continue
		key = path.name if str(module_dir) in ("", ".") else os.path.join(str(module_dir), path.name)
		if not path.name.endswith(CONFIG_SUFFIXES):
			# Docs only need to exist; their contents are never read.
			files[key] = ""
			continue
		try:
			files[key] = path.read_text(encoding="utf-8")
		except (OSError, UnicodeDecodeError) as err:
			raise HostError(reason_code="FILE_READ_ERROR", message=f"cannot read {key}: {err}", path=key) from err
	return ModuleRunner(files, root=True, module_dir=str(module_dir))


__all__ = ["CONFIG_SUFFIXES", "DOC_FILENAMES", "File", "ModulePath", "ModuleRunner", "load_module_dir"]
