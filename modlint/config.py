# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
modlint configuration file (v0).

```
{"format": "modlint-config", "version": 0,
 "disabled_by_default": false,
 "rules": {"standard_module_structure": {"enabled": true}}}
```

Only rule enablement is configurable; rule severities are fixed.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from modlint.errors import ConfigError

DEFAULT_CONFIG_PATH = Path(".modlint.json")


@dataclass(frozen=True)
class RuleConfig:
	enabled: bool


@dataclass(frozen=True)
class Config:
	disabled_by_default: bool = False
	rules: Mapping[str, RuleConfig] = field(default_factory=dict)


def _schema_error(path: Path, message: str) -> ConfigError:
	return ConfigError(reason_code="CONFIG_SCHEMA_INVALID", message=message, path=str(path))


def _load_config_json(path: Path) -> dict[str, Any]:
	try:
		data = json.loads(path.read_text(encoding="utf-8"))
	except json.JSONDecodeError as err:
		raise ConfigError(
			reason_code="CONFIG_PARSE_ERROR",
			message=err.msg,
			path=str(path),
			line=err.lineno,
			column=err.colno,
		) from err
	except OSError as err:
		raise ConfigError(reason_code="CONFIG_PARSE_ERROR", message=str(err), path=str(path)) from err
	if not isinstance(data, dict):
		raise _schema_error(path, "config must be a JSON object")
	if data.get("format") != "modlint-config" or data.get("version") != 0:
		raise _schema_error(path, "unsupported config format/version (upgrade modlint?)")
	allowed_top = {"format", "version", "disabled_by_default", "rules"}
	unknown_top = sorted(set(data.keys()) - allowed_top)
	if unknown_top:
		raise _schema_error(path, f"config has unknown top-level fields: {', '.join(unknown_top)}")
	return data


def parse_config(data: Mapping[str, Any], *, path: Path = DEFAULT_CONFIG_PATH) -> Config:
	disabled_by_default = data.get("disabled_by_default", False)
	if not isinstance(disabled_by_default, bool):
		raise _schema_error(path, "'disabled_by_default' must be a boolean")
	raw_rules = data.get("rules", {})
	if not isinstance(raw_rules, dict):
		raise _schema_error(path, "'rules' must be an object")
	rules: dict[str, RuleConfig] = {}
	for name, obj in raw_rules.items():
		if not isinstance(obj, dict):
			raise _schema_error(path, f"rule '{name}' must be an object")
		unknown = sorted(set(obj.keys()) - {"enabled"})
		if unknown:
			raise _schema_error(path, f"rule '{name}' has unknown fields: {', '.join(unknown)}")
		enabled = obj.get("enabled")
		if not isinstance(enabled, bool):
			raise _schema_error(path, f"rule '{name}' field 'enabled' must be a boolean")
		rules[name] = RuleConfig(enabled=enabled)
	return Config(disabled_by_default=disabled_by_default, rules=rules)


def load_config(path: Path | None = None) -> Config:
	"""
	Load a config file.

	With `path=None` the default `.modlint.json` is used when present and the
	built-in defaults otherwise; an explicit path must exist.
	"""
	if path is None:
		if not DEFAULT_CONFIG_PATH.exists():
			return Config()
		path = DEFAULT_CONFIG_PATH
	elif not path.exists():
		raise ConfigError(reason_code="CONFIG_PARSE_ERROR", message="config file not found", path=str(path))
	return parse_config(_load_config_json(path), path=path)


__all__ = ["Config", "DEFAULT_CONFIG_PATH", "RuleConfig", "load_config", "parse_config"]
