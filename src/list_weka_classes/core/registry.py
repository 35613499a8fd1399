"""Adapter contract for framework plugin registries."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Set

from .environment import Environment
from .models import RegistrySnapshot


class RegistryError(Exception):
    """Raised when a registry binding cannot perform discovery."""


class BaseRegistry(ABC):
    """
    Abstract base class for all framework registry bindings.

    A binding wraps the framework's own class discovery and exposes its
    internal maps read-only. The lister never mutates what these accessors
    return.
    """

    @abstractmethod
    def determine_classes(self, environment: Environment) -> None:
        """
        Run the framework's class discovery.

        Populates or refreshes the registry. Bindings read their package
        manager settings (offline mode, package loading) from ``environment``.

        Args:
            environment: Variables published before discovery

        Raises:
            RegistryError: If discovery cannot be performed
        """
        ...

    @abstractmethod
    def get_plugins(self) -> Mapping[str, Mapping[str, str]]:
        """
        Return the plugin map.

        Returns:
            Mapping of extension point name to a mapping of implementation
            name to metadata

        Example:
            ```python
            {"weka.classifiers.Classifier": {"weka.classifiers.trees.J48": "..."}}
            ```
        """
        ...

    @abstractmethod
    def get_resources(self) -> Mapping[str, Mapping[str, str]]:
        """Return the resource map (resource type -> name -> value)."""
        ...

    @abstractmethod
    def get_disabled(self) -> Set[str]:
        """Return the names of disabled implementations."""
        ...

    def snapshot(self) -> RegistrySnapshot:
        """Copy the current maps into a RegistrySnapshot."""
        return RegistrySnapshot(
            plugins={key: dict(value) for key, value in self.get_plugins().items()},
            resources={key: dict(value) for key, value in self.get_resources().items()},
            disabled=set(self.get_disabled()),
        )
