import os
import tomllib
from typing import Any

WORKING_DIR = os.path.dirname(os.path.abspath(__file__))


def resource_path(relative_path: str) -> str:
    normal_path = os.path.normpath(f"../resources/{relative_path}")
    return os.path.join(WORKING_DIR, normal_path)


def load_resource_toml(relative_path: str) -> dict[str, Any]:
    real_path = resource_path(relative_path)
    with open(real_path, mode="rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise RuntimeError(f"Error loading TOML resource from {real_path}") from e
