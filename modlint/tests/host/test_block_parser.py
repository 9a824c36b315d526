# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from modlint.core.span import Pos, Range
from modlint.errors import HostError
from modlint.host.parser import is_json_filename, parse_blocks
from modlint.host.schema import Block, BlockSchema, BodySchema
from modlint.rules.standard_module_structure import SCHEMA


def test_parse_native_blocks_with_ranges() -> None:
	src = """
variable "region" {
  type    = string
  default = "eu-west-1"
}

output "id" {
  value = aws_instance.web.id
}
"""
	blocks = parse_blocks("main.tf", src, SCHEMA)
	assert blocks == [
		Block(type="variable", labels=("region",), def_range=Range("main.tf", Pos(2, 1), Pos(2, 18))),
		Block(type="output", labels=("id",), def_range=Range("main.tf", Pos(7, 1), Pos(7, 12))),
	]


def test_unrequested_blocks_are_skipped() -> None:
	src = """
terraform {
  required_version = ">= 1.0"
}

resource "aws_instance" "web" {
  ami = "ami-123"
  tags = { Name = "web" }
}

module "child" {
  source = "./child"
}

locals {
  names = [for n in var.names : upper(n)]
}

variable "names" {}
"""
	blocks = parse_blocks("main.tf", src, SCHEMA)
	assert [(b.type, b.name) for b in blocks] == [("variable", "names")]
	assert blocks[0].def_range.start == Pos(19, 1)


def test_comments_heredocs_and_interpolations_are_opaque() -> None:
	src = """# leading comment
// another comment
/* block
   comment { */
output "policy" {
  value = <<EOT
{
  "Statement": "${var.name}"
EOT
}

output "greeting" {
  value = "hello ${var.names["first"]}!"
}
"""
	blocks = parse_blocks("outputs.tf", src, SCHEMA)
	assert [b.name for b in blocks] == ["policy", "greeting"]
	assert blocks[0].def_range.start == Pos(5, 1)
	assert blocks[1].def_range.start == Pos(12, 1)


def test_single_line_and_identifier_labels() -> None:
	blocks = parse_blocks("main.tf", 'output "o" { value = null }\nvariable v {}\n', SCHEMA)
	assert [(b.type, b.name) for b in blocks] == [("output", "o"), ("variable", "v")]
	assert blocks[1].def_range == Range("main.tf", Pos(2, 1), Pos(2, 11))


def test_label_count_mismatch_is_a_host_error() -> None:
	with pytest.raises(HostError) as excinfo:
		parse_blocks("main.tf", '\nvariable "a" "b" {}\n', SCHEMA)
	err = excinfo.value
	assert err.reason_code == "SCHEMA_MISMATCH"
	assert (err.path, err.line, err.column) == ("main.tf", 2, 1)

	with pytest.raises(HostError):
		parse_blocks("main.tf", "output {}\n", SCHEMA)


def test_syntax_error_is_a_host_error_with_location() -> None:
	with pytest.raises(HostError) as excinfo:
		parse_blocks("broken.tf", 'variable "v" {\n  default = "x"\n', SCHEMA)
	assert excinfo.value.reason_code == "PARSE_ERROR"
	assert excinfo.value.path == "broken.tf"


def test_parse_json_blocks() -> None:
	src = '{\n  "variable": {\n    "v": {"default": 1},\n    "w": {}\n  },\n  "output": [{"o": {"value": null}}]\n}'
	blocks = parse_blocks("main.tf.json", src, SCHEMA)
	assert [(b.type, b.name) for b in blocks] == [("variable", "v"), ("variable", "w"), ("output", "o")]
	assert blocks[0].def_range == Range("main.tf.json", Pos(3, 5), Pos(3, 8))
	assert blocks[2].def_range.start == Pos(6, 15)


def test_json_comment_key_and_unrequested_types_are_ignored() -> None:
	src = '{"//": "generated", "resource": {"a": {"b": {}}}, "variable": {"v": {}}}'
	blocks = parse_blocks("gen.tf.json", src, SCHEMA)
	assert [(b.type, b.name) for b in blocks] == [("variable", "v")]


def test_json_labels_must_be_object_keys() -> None:
	with pytest.raises(HostError) as excinfo:
		parse_blocks("gen.tf.json", '{"variable": "v"}', SCHEMA)
	assert excinfo.value.reason_code == "SCHEMA_MISMATCH"


def test_json_syntax_error_is_a_host_error() -> None:
	with pytest.raises(HostError) as excinfo:
		parse_blocks("gen.tf.json", '{"variable": ', SCHEMA)
	assert excinfo.value.reason_code == "PARSE_ERROR"


def test_nested_labels_follow_the_schema() -> None:
	schema = BodySchema(blocks=(BlockSchema(type="resource", label_names=("type", "name")),))
	blocks = parse_blocks("main.tf.json", '{"resource": {"aws_vpc": {"main": {}, "edge": {}}}}', schema)
	assert [b.labels for b in blocks] == [("aws_vpc", "main"), ("aws_vpc", "edge")]
	native = parse_blocks("main.tf", 'resource "aws_vpc" "main" {}\n', schema)
	assert native[0].labels == ("aws_vpc", "main")
	assert native[0].def_range.end == Pos(1, 26)


def test_is_json_filename() -> None:
	assert is_json_filename("main.tf.json")
	assert not is_json_filename("main.tf")


def test_heredoc_runs_to_its_own_delimiter() -> None:
	src = """resource "aws_instance" "web" {
  user_data = <<EOT
#!/bin/bash
if true
then
  echo "multi
  line"
fi
EOT
}

variable "after" {}
"""
	blocks = parse_blocks("main.tf", src, SCHEMA)
	assert [b.name for b in blocks] == ["after"]
	assert blocks[0].def_range.start == Pos(12, 1)


def test_indented_heredoc_delimiter() -> None:
	src = """output "script" {
  value = <<-EOT
    done
    EOT
}
"""
	blocks = parse_blocks("outputs.tf", src, SCHEMA)
	assert [b.name for b in blocks] == ["script"]


def test_interpolation_may_span_lines() -> None:
	src = 'locals {\n  x = "${\n var.a\n }"\n}\noutput "o" {}\n'
	blocks = parse_blocks("main.tf", src, SCHEMA)
	assert [b.name for b in blocks] == ["o"]
	assert blocks[0].def_range.start == Pos(6, 1)


@pytest.mark.parametrize(
	"label, expected",
	[
		('"r\\u00e9gion"', "région"),
		('"café"', "café"),
		('"tab\\there"', "tab\there"),
		('"q\\"uote\\\\"', 'q"uote\\'),
		('"astral\\U0001F600"', "astral\U0001F600"),
		('"$${literal}"', "${literal}"),
	],
)
def test_native_labels_are_unescaped(label: str, expected: str) -> None:
	blocks = parse_blocks("variables.tf", f"variable {label} {{}}\n", SCHEMA)
	assert blocks[0].labels == (expected,)


def test_non_ascii_label_range_counts_characters() -> None:
	blocks = parse_blocks("variables.tf", 'variable "café" {}\n', SCHEMA)
	assert blocks[0].def_range == Range("variables.tf", Pos(1, 1), Pos(1, 16))


@pytest.mark.parametrize("label", ['"a\\q"', '"big\\UFFFFFFFF"'])
def test_invalid_native_escape_is_a_parse_error(label: str) -> None:
	with pytest.raises(HostError) as excinfo:
		parse_blocks("variables.tf", f"\nvariable {label} {{}}\n", SCHEMA)
	err = excinfo.value
	assert err.reason_code == "PARSE_ERROR"
	assert (err.path, err.line, err.column) == ("variables.tf", 2, 10)


def test_json_keys_are_decoded_as_json() -> None:
	blocks = parse_blocks("gen.tf.json", '{"\\u20ac": 1, "variable": {"r\\u00e9gion": {}, "caf\\u00e9": {}}}', SCHEMA)
	assert [(b.type, b.name) for b in blocks] == [("variable", "région"), ("variable", "café")]


def test_invalid_json_escape_is_a_parse_error() -> None:
	with pytest.raises(HostError) as excinfo:
		parse_blocks("gen.tf.json", '{"variable": {"a\\x": {}}}', SCHEMA)
	err = excinfo.value
	assert err.reason_code == "PARSE_ERROR"
	assert (err.line, err.column) == (1, 15)


def test_is_json_filename_checks_the_extension() -> None:
	assert is_json_filename("infra/override.json")
	assert not is_json_filename("main.json.tf")
	assert not is_json_filename("json")
