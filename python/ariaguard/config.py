# SPDX-License-Identifier: AGPL-3.0-only
import copy
import os
from pathlib import Path
from typing import Any, Dict, List, Optional
try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .known_attributes import KnownAttributeSet, default_known_attributes

CONFIG_FILENAME = "ariaguard.toml"
DEV_MODE_ENV_KEY = "ARIAGUARD_DEV"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

# Default configuration structure
DEFAULT_CONFIG = {
    "validator": {
        # None means "follow __debug__"; `python -O` is the production build.
        "enabled": None,
    },
    "attributes": {
        "extra": [],
    },
}


def env_dev_mode(environ: Optional[Dict[str, str]] = None) -> Optional[bool]:
    """Read the development-mode override from the environment, if any."""
    env = os.environ if environ is None else environ
    raw = env.get(DEV_MODE_ENV_KEY)
    if raw is None:
        return None
    text = raw.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(
        f"Unsupported {DEV_MODE_ENV_KEY} value {raw!r}. Expected one of "
        f"{sorted(_TRUE_VALUES | _FALSE_VALUES)}."
    )


class Config:
    def __init__(self, data: Dict[str, Any], path: Optional[Path] = None):
        self.data = data
        self.path = path

    @classmethod
    def defaults(cls) -> "Config":
        return cls(copy.deepcopy(DEFAULT_CONFIG))

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from ariaguard.toml."""
        if path is None:
            path = Path.cwd() / CONFIG_FILENAME
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {path}.")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Failed to parse {path}: {e}")

        config = cls(data, path)
        config._check()
        return config

    @classmethod
    def discover(cls, start: Optional[Path] = None) -> "Config":
        """Load the nearest ariaguard.toml, or fall back to defaults."""
        here = Path(start) if start is not None else Path.cwd()
        for directory in (here, *here.parents):
            candidate = directory / CONFIG_FILENAME
            if candidate.is_file():
                return cls.load(candidate)
        return cls.defaults()

    def _check(self) -> None:
        enabled = self.validator.get("enabled")
        if enabled is not None and not isinstance(enabled, bool):
            raise ValueError(f"[validator] enabled must be a boolean in {self.path}")
        extra = self.attributes.get("extra", [])
        if not isinstance(extra, (list, str)):
            raise ValueError(f"[attributes] extra must be a list of names in {self.path}")
        self.known_attributes()

    @property
    def validator(self) -> Dict[str, Any]:
        return self.data.get("validator", {})

    @property
    def attributes(self) -> Dict[str, Any]:
        return self.data.get("attributes", {})

    def get_extra_attributes(self) -> List[str]:
        extra = self.attributes.get("extra", [])
        if isinstance(extra, str):
            extra = [extra]
        return [str(name) for name in extra]

    def is_dev_mode(self, environ: Optional[Dict[str, str]] = None) -> bool:
        override = env_dev_mode(environ)
        if override is not None:
            return override
        enabled = self.validator.get("enabled")
        if enabled is None:
            return __debug__
        return bool(enabled)

    def known_attributes(self) -> KnownAttributeSet:
        return default_known_attributes().with_extra(self.get_extra_attributes())
