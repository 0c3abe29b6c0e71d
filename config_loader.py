"""Helpers for resolving configuration files and runtime options."""

import json
import os
from typing import Any, Dict, Optional, Sequence

from styleguide.models import (
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_CODE_MARKER_CLASSES,
    DEFAULT_SKIP_MARKERS,
    ConverterOptions,
)

DEFAULT_CONFIG_NAME = "guide_config.json"
CONFIG_ENV_VAR = "GUIDE_CONVERTER_CONFIG"
MISSING_CODE_POLICIES = ("fail", "skip")


class ConfigError(Exception):
    """Raised when runtime configuration cannot be loaded."""


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the absolute config path, or None when no default exists.

    An explicitly requested file (argument or environment variable) must
    exist; the default ``guide_config.json`` is optional.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    candidate = explicit or DEFAULT_CONFIG_NAME
    expanded = os.path.expanduser(candidate)
    if os.path.isabs(expanded) and os.path.isfile(expanded):
        return expanded

    search_roots = [os.getcwd(), os.path.dirname(os.path.abspath(__file__))]
    for root in search_roots:
        resolved = os.path.abspath(os.path.join(root, expanded))
        if os.path.isfile(resolved):
            return resolved

    if explicit:
        raise ConfigError(f"Configuration file not found: {candidate}")
    return None


def _resolve_path(value: str, base_dir: str) -> str:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.abspath(os.path.join(base_dir, expanded))


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load a JSON config file and normalize any filesystem paths."""
    config_path = _resolve_config_path(path)
    if config_path is None:
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be an object: {config_path}")

    base_dir = os.path.dirname(config_path)
    resolved: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str) and key.endswith(("_html", "_dir", "_path")):
            resolved[key] = _resolve_path(value, base_dir)
        else:
            resolved[key] = value

    return resolved


def _string_tuple(
    value: Any, key: str, default: Sequence[str]
) -> tuple[str, ...]:
    if value is None:
        return tuple(default)
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ConfigError(f"{key} must be a string or a list of strings.")


def build_options(
    config: Dict[str, Any],
    *,
    code_language: Optional[str] = None,
    on_missing_code: Optional[str] = None,
) -> ConverterOptions:
    """Build converter options from config values and CLI overrides."""
    policy = on_missing_code or config.get("on_missing_code", "fail")
    if policy not in MISSING_CODE_POLICIES:
        raise ConfigError(
            f"on_missing_code must be one of {MISSING_CODE_POLICIES}, "
            f"got {policy!r}."
        )

    return ConverterOptions(
        code_language=(
            code_language
            or config.get("code_language")
            or DEFAULT_CODE_LANGUAGE
        ),
        code_marker_classes=_string_tuple(
            config.get("code_marker_classes"),
            "code_marker_classes",
            DEFAULT_CODE_MARKER_CLASSES,
        ),
        skip_markers=_string_tuple(
            config.get("skip_markers"),
            "skip_markers",
            DEFAULT_SKIP_MARKERS,
        ),
        on_missing_code=policy,
    )


def resolve_runtime_options(
    *,
    config_path: Optional[str] = None,
    input_html: Optional[str] = None,
    output_path: Optional[str] = None,
    code_language: Optional[str] = None,
    on_missing_code: Optional[str] = None,
) -> Dict[str, Any]:
    """Resolve runtime arguments by combining CLI overrides with config."""
    config = load_config(config_path)

    resolved_input = input_html or config.get("input_html")
    resolved_output = output_path or config.get("output_path")

    if not resolved_input:
        raise ConfigError("Missing input_html configuration.")
    if not resolved_output:
        raise ConfigError("Missing output_path configuration.")

    return {
        "input_html": _resolve_path(resolved_input, os.getcwd()),
        "output_path": _resolve_path(resolved_output, os.getcwd()),
        "options": build_options(
            config,
            code_language=code_language,
            on_missing_code=on_missing_code,
        ),
    }
