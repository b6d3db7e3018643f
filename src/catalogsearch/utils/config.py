"""Persistent CLI defaults for catalogsearch.

Stores values such as the default site, language and device type in
``~/.config/catalogsearch/config.toml`` (respecting XDG_CONFIG_HOME), so they
need not be repeated on every ``catalogsearch search`` call. Uses tomli/tomli-w
for TOML parsing and writing.

Example config.toml::

    base_url = "https://search.example.com/"

    [query]
    site = "cmore.se"
    lang = "sv"
    device_type = "tve_web"
"""

import contextlib
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import tomli
import tomli_w

_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
CONFIG_DIR = _xdg_config_home / "catalogsearch"
CONFIG_FILE = CONFIG_DIR / "config.toml"

ENV_PREFIX = "CATALOGSEARCH_"
_TRUTHY = {"1", "true", "yes", "on"}

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""
    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Return ``data["a"]["b"]`` for ``"a.b"``, or None if any level is missing."""
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str) -> str:
    """Convert ``"query.site"`` to ``"CATALOGSEARCH_QUERY_SITE"``."""
    return ENV_PREFIX + dotted_key.replace(".", "_").upper()


def _coerce(value: Any, default: T) -> T:  # noqa: ANN401
    """Coerce *value* to the type of *default*, falling back to *default*."""
    if isinstance(default, bool):
        if isinstance(value, bool):
            return cast(T, value)
        if isinstance(value, str):
            return cast(T, value.lower() in _TRUTHY)
        return default
    if isinstance(default, int):
        with contextlib.suppress(TypeError, ValueError):
            return cast(T, int(value))
        return default
    if isinstance(default, float):
        with contextlib.suppress(TypeError, ValueError):
            return cast(T, float(value))
        return default
    if isinstance(default, str):
        return cast(T, str(value))
    return cast(T, value)


def resolve_setting(key: str, *, default: T, cli_value: T | None = None) -> T:
    """Resolve *key* with precedence CLI > env > config file > default.

    Args:
        key: Dotted key path, e.g. ``"query.site"`` or ``"base_url"``.
        default: Value used when no source provides one; also decides the
            type values are coerced to.
        cli_value: Value passed on the command line (``None`` when absent).

    Returns:
        The resolved value.
    """
    if cli_value is not None:
        return cli_value

    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce(os.environ[env_var], default)

    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce(file_val, default)

    return default


def set_setting(key: str, value: Any) -> None:  # noqa: ANN401
    """Persist *value* under dotted *key* in config.toml.

    Intermediate tables are created as needed; other keys are preserved.

    Raises:
        ValueError: If a parent of *key* already holds a non-table value.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = _read_config_file()
    *parents, leaf = key.split(".")
    table = data
    for part in parents:
        table = table.setdefault(part, {})
        if not isinstance(table, dict):
            raise ValueError(f"Config key {part!r} is not a table")
    table[leaf] = value
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)
