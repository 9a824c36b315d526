# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
ModuleContext: the snapshot of a module that rules evaluate.

A context is built fresh from a Runner for every evaluation and is frozen
afterwards; rules never see the runner while evaluating, only this snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from modlint.host.protocol import ExpandMode, File, Runner
from modlint.host.schema import Block, Blocks, BodySchema


@dataclass(frozen=True)
class ModuleContext:
	is_root: bool
	files: Mapping[str, File] = field(default_factory=lambda: MappingProxyType({}))
	blocks: Tuple[Block, ...] = ()

	def __post_init__(self) -> None:
		# Freeze caller-supplied containers so evaluation cannot mutate them.
		object.__setattr__(self, "files", MappingProxyType(dict(self.files)))
		object.__setattr__(self, "blocks", tuple(self.blocks))

	def blocks_of(self, block_type: str) -> Tuple[Block, ...]:
		return tuple(Blocks(self.blocks).by_type().get(block_type, ()))

	@classmethod
	def from_runner(cls, runner: Runner, schema: BodySchema) -> "ModuleContext":
		"""
		Fetch a context from `runner`.

		Host errors propagate unchanged. Non-root modules and empty modules
		short-circuit without asking for content.
		"""
		path = runner.get_module_path()
		if not path.is_root():
			return cls(is_root=False)
		files = runner.get_files()
		if not files:
			return cls(is_root=True)
		content = runner.get_module_content(schema, expand_mode=ExpandMode.NONE)
		return cls(is_root=True, files=files, blocks=tuple(content.blocks))


__all__ = ["ModuleContext"]
