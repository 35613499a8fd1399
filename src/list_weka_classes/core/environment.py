"""Process-wide variable store consulted by registry bindings during discovery."""

import logging
from typing import Optional

from .models import ListerOptions

logger = logging.getLogger(__name__)

# Whether to run the package manager in offline mode
OFFLINE = "weka.packageManager.offline"

# Whether to load packages before determining the class hierarchies
LOAD_PACKAGES = "weka.packageManager.loadPackages"


class Environment:
    """
    Key/value store of string variables.

    Bindings read their discovery settings from an Environment instance that
    is handed to them explicitly. ``Environment.system_wide()`` returns the
    shared instance used when callers do not supply their own.
    """

    _system_wide: Optional["Environment"] = None

    def __init__(self, variables: Optional[dict[str, str]] = None):
        self._variables: dict[str, str] = dict(variables or {})

    @classmethod
    def system_wide(cls) -> "Environment":
        """Return the process-wide environment, creating it on first use."""
        if cls._system_wide is None:
            cls._system_wide = cls()
        return cls._system_wide

    def add_variable(self, key: str, value: str) -> None:
        self._variables[key] = value

    def get_variable(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._variables.get(key, default)

    def get_flag(self, key: str) -> bool:
        """Interpret a variable as a boolean ("true" in any case)."""
        value = self._variables.get(key)
        return value is not None and value.strip().lower() == "true"

    def __contains__(self, key: str) -> bool:
        return key in self._variables


def _encode(value: bool) -> str:
    return "true" if value else "false"


def publish(options: ListerOptions, environment: Environment) -> None:
    """
    Write the package manager settings into the environment.

    Must run before the registry performs discovery.

    Args:
        options: Parsed lister options
        environment: Store the registry binding reads from
    """
    environment.add_variable(OFFLINE, _encode(options.offline))
    environment.add_variable(LOAD_PACKAGES, _encode(options.load_packages))
    logger.debug(
        f"Published {OFFLINE}={_encode(options.offline)}, "
        f"{LOAD_PACKAGES}={_encode(options.load_packages)}"
    )
