"""Registry binding backed by a YAML class catalog and installed packages."""

import logging
from collections.abc import Mapping, Set
from importlib.metadata import entry_points
from pathlib import Path

import yaml

from ...core.environment import LOAD_PACKAGES, OFFLINE, Environment
from ...core.registry import BaseRegistry, RegistryError

logger = logging.getLogger(__name__)

# Entry point groups advertising implementations: weka.plugins.<extension point>
ENTRY_POINT_PREFIX = "weka.plugins."

DEFAULT_CATALOG = Path(__file__).parent / "data" / "weka_classes.yaml"


class CatalogRegistry(BaseRegistry):
    """
    Registry whose built-in hierarchy comes from a YAML catalog.

    Catalog layout:

        plugins:
          <extension point>:
            <implementation>: <metadata>   # or a plain list of names
        resources:
          <resource type>:
            <name>: <value>
        disabled:
          - <implementation>

    With package loading enabled, implementations advertised by installed
    distributions under ``weka.plugins.<extension point>`` entry point groups
    are merged in.
    """

    def __init__(self, catalog_path: Path | None = None):
        """Initialize registry; maps stay empty until discovery runs."""
        self.catalog_path = Path(catalog_path) if catalog_path else DEFAULT_CATALOG
        self._plugins: dict[str, dict[str, str]] = {}
        self._resources: dict[str, dict[str, str]] = {}
        self._disabled: set[str] = set()

    def determine_classes(self, environment: Environment) -> None:
        """
        Rebuild the maps from the catalog and, optionally, installed packages.

        Args:
            environment: Supplies the offline and package loading flags

        Raises:
            RegistryError: If the catalog is missing or malformed
        """
        data = self._load_catalog()

        self._plugins = self._read_hierarchy(data, "plugins")
        self._resources = self._read_hierarchy(data, "resources")
        self._disabled = set(self._read_names(data.get("disabled") or [], "disabled"))

        if environment.get_flag(OFFLINE):
            logger.info("Package manager offline, discovery is local only")

        if environment.get_flag(LOAD_PACKAGES):
            added = self._load_packages()
            logger.info(f"Loaded {added} class(es) from installed packages")

        logger.info(
            f"Discovered {len(self._plugins)} extension point(s) "
            f"from {self.catalog_path}"
        )

    def get_plugins(self) -> Mapping[str, Mapping[str, str]]:
        return self._plugins

    def get_resources(self) -> Mapping[str, Mapping[str, str]]:
        return self._resources

    def get_disabled(self) -> Set[str]:
        return self._disabled

    def _load_catalog(self) -> dict:
        """Load and minimally validate the YAML catalog."""
        try:
            with open(self.catalog_path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise RegistryError(f"Cannot read catalog {self.catalog_path}: {e}") from e
        except yaml.YAMLError as e:
            raise RegistryError(f"Malformed catalog {self.catalog_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise RegistryError(
                f"Malformed catalog {self.catalog_path}: top level must be a mapping"
            )
        return data

    def _read_hierarchy(self, data: dict, key: str) -> dict[str, dict[str, str]]:
        section = data.get(key) or {}
        if not isinstance(section, dict):
            raise RegistryError(f"Catalog section '{key}' must be a mapping")

        hierarchy = {}
        for group, members in section.items():
            if members is None:
                hierarchy[str(group)] = {}
            elif isinstance(members, dict):
                hierarchy[str(group)] = {
                    str(name): "" if value is None else str(value)
                    for name, value in members.items()
                }
            else:
                # Plain lists use the name as its own metadata
                hierarchy[str(group)] = {
                    name: name for name in self._read_names(members, f"{key}.{group}")
                }
        return hierarchy

    def _read_names(self, members, where: str) -> list[str]:
        if not isinstance(members, list):
            raise RegistryError(f"Catalog entry '{where}' must be a list or mapping")
        return [str(name) for name in members]

    def _load_packages(self) -> int:
        """Merge implementations advertised through entry points."""
        added = 0
        eps = entry_points()

        for group in sorted(eps.groups):
            if not group.startswith(ENTRY_POINT_PREFIX):
                continue
            super_class = group[len(ENTRY_POINT_PREFIX):]
            if not super_class:
                continue

            members = self._plugins.setdefault(super_class, {})
            for ep in eps.select(group=group):
                if ep.name not in members:
                    added += 1
                members[ep.name] = ep.value
                logger.debug(f"Package class {ep.name} registered under {super_class}")

        return added
