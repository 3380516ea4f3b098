from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Set, Tuple

import yaml


ENV_PREFIX = "BINGO_SIM_"

PATH_KEYS = ("input_dir", "log_file")


def _read_config_file(config_path: Path | None) -> Dict[str, Any]:
    if not config_path:
        return {}
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    suffix = config_path.suffix.lower()
    text = config_path.read_text(encoding="utf-8")
    if suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError("Top-level YAML config must be a mapping")
        return data
    if suffix == ".json":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Top-level JSON config must be a mapping")
        return data
    raise ValueError(f"Unsupported config extension: {suffix}")


def _collect_env_vars(env: Mapping[str, str]) -> Dict[str, Any]:
    """Map ENV variables with BINGO_SIM_ prefix to config keys.

    Keys not present in the map are ignored.
    """
    mapping: Dict[str, str] = {
        f"{ENV_PREFIX}INPUT_DIR": "input_dir",
        f"{ENV_PREFIX}INPUT_PATTERN": "input_pattern",
        f"{ENV_PREFIX}LOG_LEVEL": "log_level",
        f"{ENV_PREFIX}LOG_FILE": "log_file",
    }
    return {cfg_key: env[env_key] for env_key, cfg_key in mapping.items() if env_key in env}


def _apply_overrides(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def resolve_paths(
    resolved: Dict[str, Any],
    config_file: Path | None,
    file_keys: Set[str],
) -> Dict[str, Any]:
    """Normalize paths per policy.

    - Paths from config file: resolve relative to config directory
    - Paths from CLI, ENV or defaults: resolve relative to CWD
    """
    cwd = Path.cwd()
    cfg_dir = config_file.parent if config_file else None

    def normalize(path_value: str, from_file: bool) -> str | None:
        if path_value == "":
            return None
        p = Path(path_value)
        if p.is_absolute():
            return str(p)
        base = (cfg_dir or cwd) if from_file else cwd
        return str((base / p).resolve())

    result = dict(resolved)
    for key in PATH_KEYS:
        value = resolved.get(key)
        if value is None:
            continue
        result[key] = normalize(str(value), key in file_keys)
    return result


def resolve_parameters(
    *,
    config_path_str: str | None,
    cli_overrides: Mapping[str, Any],
    env: Mapping[str, str] | None = None,
) -> Tuple[Dict[str, Any], Path | None]:
    """Resolve parameters with precedence CLI > ENV > config > defaults.

    Returns (resolved_params, config_path)
    """
    config_path = Path(config_path_str).resolve() if config_path_str else None
    file_cfg = _read_config_file(config_path) if config_path else {}
    env_map = _collect_env_vars(os.environ if env is None else env)

    defaults: Dict[str, Any] = {
        "input_dir": "input",
        "input_pattern": "day{day}.txt",
        "log_level": "INFO",
        "log_file": None,
    }

    merged = _apply_overrides(defaults, file_cfg)
    merged = _apply_overrides(merged, env_map)
    merged = _apply_overrides(merged, cli_overrides)

    # a path is file-relative only when the file supplied the winning value
    file_keys = {
        key
        for key in PATH_KEYS
        if key in file_cfg and key not in env_map and cli_overrides.get(key) is None
    }
    merged = resolve_paths(merged, config_path, file_keys)
    return merged, config_path
