# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
modlint.core: shared types used by rules and hosts.

Modules:
  - span: Pos/Range source locations (INITIAL_POS sentinel)
  - diagnostics: Diagnostic and Severity
"""

__all__ = [
	"span",
	"diagnostics",
]
