# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
modlint.host: the configuration host side of rule evaluation.

Modules:
  - protocol: Runner/ModulePath/File protocols and ExpandMode
  - schema: BodySchema/BlockSchema requests and Block/BodyContent answers
  - parser: lark-based block locator for native and JSON syntax
  - runner: in-memory ModuleRunner and the directory loader
"""

__all__ = [
	"protocol",
	"schema",
	"parser",
	"runner",
]
