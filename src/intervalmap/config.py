from typing import Any

from intervalmap.structures import ReadonlyDict
from intervalmap.utils import io_util

_DEFAULTS: dict[str, Any] = {
    "trace_assignments": False,
}


def _parse_config() -> ReadonlyDict[str, Any]:
    """
    Load and parse the packaged config.toml.
    Missing keys of the [interval_map] table fall back to built-in defaults.
    Raises:
        TypeError: If a setting has a different type than its default.
    """
    conf = io_util.load_resource_toml("config.toml")

    settings = dict(_DEFAULTS)
    for name, value in conf.get("interval_map", {}).items():
        if name in _DEFAULTS and not isinstance(value, type(_DEFAULTS[name])):
            raise TypeError(
                f"Setting '{name}' must be of type {type(_DEFAULTS[name]).__name__}."
            )
        settings[name] = value

    return ReadonlyDict(settings)


config = _parse_config()
