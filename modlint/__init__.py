# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
modlint: structure checks for infrastructure-as-code modules.

Packages:
  core:  ranges and diagnostics shared by rules and hosts
  host:  configuration host protocol plus the bundled file-system host
  rules: rule implementations

The CLI entrypoint is `modlint.cli:main`.
"""

__version__ = "0.1.0"

__all__ = ["core", "host", "rules"]
