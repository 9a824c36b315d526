# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Body schemas and the block content a host returns for them.

A rule asks the host for the blocks it cares about by passing a BodySchema;
the host answers with a BodyContent holding only the requested block types.
Nested bodies are not expanded beyond what the schema asks for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from modlint.core.span import Range


@dataclass(frozen=True)
class BodySchema:
	blocks: Tuple["BlockSchema", ...] = ()

	def block_schema(self, block_type: str) -> "BlockSchema | None":
		for schema in self.blocks:
			if schema.type == block_type:
				return schema
		return None


@dataclass(frozen=True)
class BlockSchema:
	type: str
	label_names: Tuple[str, ...] = ()
	body: BodySchema = field(default_factory=BodySchema)


@dataclass(frozen=True)
class Block:
	"""A top-level block found in a module file."""

	type: str
	labels: Tuple[str, ...]
	def_range: Range

	@property
	def name(self) -> str:
		return self.labels[0]


class Blocks(List[Block]):
	def by_type(self) -> Dict[str, "Blocks"]:
		"""Group blocks by type, keeping discovery order inside each group."""
		out: Dict[str, Blocks] = {}
		for block in self:
			out.setdefault(block.type, Blocks()).append(block)
		return out


@dataclass(frozen=True)
class BodyContent:
	blocks: Blocks = field(default_factory=Blocks)


__all__ = ["Block", "BlockSchema", "Blocks", "BodyContent", "BodySchema"]
