# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Rule implementations shipped with modlint.
"""

from .base import DefaultRule, Rule
from .standard_module_structure import StandardModuleStructureRule

__all__ = ["DefaultRule", "Rule", "StandardModuleStructureRule"]
