# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Locate top-level blocks in configuration files.

Native syntax (`*.tf`) and JSON syntax (`*.tf.json`) are parsed with lark
grammars that keep token positions, so each block carries the exact range of
its header. Bodies are never interpreted.

Every failure surfaces as `HostError(PARSE_ERROR)` or
`HostError(SCHEMA_MISMATCH)`.
"""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Iterable, List

from lark import Lark, Token, Tree
from lark.exceptions import LarkError

from modlint.core.span import Range
from modlint.errors import HostError
from .schema import Block, BodySchema

_GRAMMAR_DIR = Path(__file__).parent

_HCL_PARSER = Lark(
	_GRAMMAR_DIR.joinpath("hcl.lark").read_text(),
	parser="lalr",
	start="start",
	propagate_positions=True,
	maybe_placeholders=False,
)

_JSON_PARSER = Lark(
	_GRAMMAR_DIR.joinpath("json.lark").read_text(),
	parser="lalr",
	start="start",
	propagate_positions=True,
	maybe_placeholders=False,
)

# Property name treated as a comment in JSON syntax bodies.
_JSON_COMMENT_KEY = "//"

_HCL_ESCAPE = re.compile(r"\\(?:u([0-9A-Fa-f]{4})|U([0-9A-Fa-f]{8})|(.))|(\$\$\{|%%\{)", re.DOTALL)
_HCL_SIMPLE_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", '"': '"', "\\": "\\"}


def is_json_filename(filename: str) -> bool:
	"""True when `filename` has the `.json` extension (e.g. `main.tf.json`)."""
	return os.path.splitext(filename)[1] == ".json"


def _string_error(filename: str, tok: Token, detail: str) -> HostError:
	return HostError(
		reason_code="PARSE_ERROR",
		message=f"invalid string {tok.value} in {filename}: {detail}",
		path=filename,
		line=tok.line,
		column=tok.column,
	)


def _decode_hcl_string(filename: str, tok: Token) -> str:
	"""Strip quotes and interpret the escapes of a native-syntax quoted label."""

	def _unescape(m: re.Match[str]) -> str:
		hex4, hex8, simple, doubled = m.groups()
		if doubled is not None:
			return doubled[1:]
		if simple is not None:
			if simple not in _HCL_SIMPLE_ESCAPES:
				raise _string_error(filename, tok, f"unsupported escape sequence \\{simple}")
			return _HCL_SIMPLE_ESCAPES[simple]
		code = int(hex4 or hex8, 16)
		if code > 0x10FFFF:
			raise _string_error(filename, tok, f"code point U+{code:X} out of range")
		return chr(code)

	return _HCL_ESCAPE.sub(_unescape, tok.value[1:-1])


def _decode_json_string(filename: str, tok: Token) -> str:
	try:
		return json.loads(tok.value)
	except ValueError as err:
		raise _string_error(filename, tok, str(err)) from err


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	return node.type


def _parse_error(filename: str, err: LarkError) -> HostError:
	return HostError(
		reason_code="PARSE_ERROR",
		message=f"failed to parse {filename}: {err}",
		path=filename,
		line=getattr(err, "line", None),
		column=getattr(err, "column", None),
	)


def parse_blocks(filename: str, source: str, schema: BodySchema) -> List[Block]:
	"""
	Return the top-level blocks of `source` requested by `schema`, in source order.

	Raises HostError on syntax errors and on blocks whose label count does not
	match the schema.
	"""
	if is_json_filename(filename):
		found = _json_blocks(filename, source, schema)
	else:
		found = _hcl_blocks(filename, source, schema)
	blocks: List[Block] = []
	for block in found:
		block_schema = schema.block_schema(block.type)
		if block_schema is None:
			continue
		if len(block.labels) != len(block_schema.label_names):
			raise HostError(
				reason_code="SCHEMA_MISMATCH",
				message=(
					f"{block.type} block expects {len(block_schema.label_names)} label(s) "
					f"({', '.join(block_schema.label_names)}), got {len(block.labels)}"
				),
				path=filename,
				line=block.def_range.start.line,
				column=block.def_range.start.column,
			)
		blocks.append(block)
	return blocks


def _hcl_blocks(filename: str, source: str, schema: BodySchema) -> Iterable[Block]:
	try:
		tree = _HCL_PARSER.parse(source)
	except LarkError as err:
		raise _parse_error(filename, err) from err
	for child in tree.children:
		if not isinstance(child, Tree) or _name(child) != "block":
			continue
		type_tok = child.children[0]
		label_toks = [c for c in child.children[1:] if isinstance(c, Token)]
		labels = tuple(
			_decode_hcl_string(filename, tok) if tok.type == "STRING" else tok.value for tok in label_toks
		)
		last = label_toks[-1] if label_toks else type_tok
		yield Block(
			type=type_tok.value,
			labels=labels,
			def_range=Range.from_tokens(filename, type_tok, last),
		)


def _json_blocks(filename: str, source: str, schema: BodySchema) -> Iterable[Block]:
	try:
		tree = _JSON_PARSER.parse(source)
	except LarkError as err:
		raise _parse_error(filename, err) from err
	root = tree.children[0]
	for type_tok, value in _pairs(root):
		block_type = _decode_json_string(filename, type_tok)
		if block_type == _JSON_COMMENT_KEY:
			continue
		block_schema = schema.block_schema(block_type)
		if block_schema is None:
			continue
		for labels, last_tok in _json_labels(filename, value, len(block_schema.label_names)):
			yield Block(
				type=block_type,
				labels=labels,
				def_range=Range.from_tokens(filename, last_tok, last_tok),
			)


def _pairs(obj: Tree) -> Iterable[tuple[Token, Tree | Token]]:
	for pair in obj.children:
		key, value = pair.children
		yield key, value


def _json_labels(filename: str, value: Tree | Token, depth: int) -> Iterable[tuple[tuple[str, ...], Token]]:
	"""
	Walk `depth` levels of nested object keys; each path is one block's labels.

	A block type (or label) may map to an array of objects, each contributing
	blocks of its own.
	"""
	if depth == 0:
		return
	if isinstance(value, Tree) and _name(value) == "array":
		for item in value.children:
			yield from _json_labels(filename, item, depth)
		return
	if not isinstance(value, Tree) or _name(value) != "object":
		line = getattr(value, "line", None) or getattr(getattr(value, "meta", None), "line", None)
		raise HostError(
			reason_code="SCHEMA_MISMATCH",
			message="block labels must be given as JSON object keys",
			path=filename,
			line=line,
		)
	for key_tok, inner in _pairs(value):
		label = _decode_json_string(filename, key_tok)
		if depth == 1:
			yield (label,), key_tok
			continue
		for rest, last_tok in _json_labels(filename, inner, depth - 1):
			yield (label, *rest), last_tok


__all__ = ["is_json_filename", "parse_blocks"]
