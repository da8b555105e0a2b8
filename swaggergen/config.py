"""
YAML configuration files.

A file is read into a DotDict. Environment variables named
SWAGGERGEN_<SECTION>_<KEY> then override single values, and `${a.b}`
references inside strings are replaced by the value found at that path.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .dot_dict import DotDict, DotDictPathNotFoundError

MAX_CONFIG_SIZE_BYTES = 10 * 1024 * 1024

DEFAULT_ENV_PREFIX = "SWAGGERGEN_"

_REFERENCE = re.compile(r"\$\{([a-zA-Z0-9_.]+)\}")


def _check_file_size(path: Path) -> None:
    size = os.path.getsize(path)
    if size > MAX_CONFIG_SIZE_BYTES:
        raise ValueError(
            f"Configuration file '{path}' has {size} bytes, exceeding maximum size "
            f"of {MAX_CONFIG_SIZE_BYTES} bytes"
        )


def _parse_env_value(raw: str) -> Any:
    """
    Interpret an environment value.

    "null", "none" and "" are None, "true"/"false" are booleans, comma
    separated values are lists, numbers are int or float. Anything else
    stays a string.
    """
    lowered = raw.lower()
    if lowered in ("", "null", "none"):
        return None
    if lowered in ("true", "false"):
        return lowered == "true"
    if "," in raw:
        return [_parse_env_value(part.strip()) for part in raw.split(",")]

    try:
        return float(raw) if "." in raw else int(raw)
    except ValueError:
        return raw


def _assign(data: dict[str, Any], path: list[str], value: Any) -> None:
    """Set data[path[0]]...[path[-1]], replacing non-mapping sections."""
    *sections, leaf = path
    for section in sections:
        child = data.get(section)
        if not isinstance(child, dict):
            child = data[section] = {}
        data = child
    data[leaf] = value


class Config(DotDict):
    """
    Configuration loaded from a YAML file.

    Example:
        config = Config("etc/swaggergen.yaml")
        url = config.get("dbs.db.url")

    With SWAGGERGEN_SCHEMA_CONNECTION=reporting set, `config.schema.connection`
    is "reporting" whatever the file says. Variable names map to lowercase
    paths split at underscores, so keys containing "_" cannot be overridden.
    """

    def __init__(
        self,
        fname: str,
        enable_env_overrides: bool = True,
        env_prefix: str = DEFAULT_ENV_PREFIX,
    ):
        """
        Load `fname`.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is too large or its top level is not a mapping
            yaml.YAMLError: If the file cannot be parsed
            DotDictPathNotFoundError: If a `${...}` reference has no value
        """
        super().__init__()
        self._env_prefix = env_prefix
        self._config_path = Path(fname).resolve()

        data = self._read(self._config_path)
        if enable_env_overrides:
            for path, value in self._env_values().items():
                _assign(data, path.split("."), value)

        self.set(**data)
        self.set(**{k: self._substitute(v) for k, v in self.to_dict().items()})

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        _check_file_size(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file '{path}' must contain a mapping")
        return data

    def _env_values(self) -> dict[str, Any]:
        prefix = self._env_prefix
        return {
            name[len(prefix) :].lower().replace("_", "."): _parse_env_value(raw)
            for name, raw in os.environ.items()
            if name.startswith(prefix)
        }

    def _substitute(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: self._substitute(v) for k, v in value.items()}
        if isinstance(value, list):
            return [self._substitute(v) for v in value]
        if isinstance(value, str):
            return _REFERENCE.sub(self._reference_value, value)
        return value

    def _reference_value(self, match: re.Match) -> str:
        path = match.group(1)
        if not self.has(path):
            raise DotDictPathNotFoundError(self, path)
        return str(self.get(path))

    @property
    def path(self) -> Path:
        """Resolved path of the loaded file."""
        return self._config_path
