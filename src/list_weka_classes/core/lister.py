"""Lister for enumerating class hierarchies held by a registry binding."""

import importlib
import logging
import time
from typing import Optional

from .environment import Environment, publish
from .models import ListerOptions, ListingResult
from .registry import BaseRegistry, RegistryError
from .reporting import TextReporter

logger = logging.getLogger(__name__)

# Registry bindings (name -> module exposing REGISTRY_CLASS)
REGISTRY_BINDINGS = {
    "catalog": "list_weka_classes.registries.catalog",
}


class UnknownSuperclassError(Exception):
    """Raised when the queried superclass is not a known extension point."""

    def __init__(self, name: str):
        super().__init__(f"Unknown superclass: {name}")
        self.name = name


def load_registry(name: str = "catalog", **kwargs) -> BaseRegistry:
    """
    Instantiate a registry binding by name.

    Each binding module must expose a REGISTRY_CLASS variable pointing to
    its BaseRegistry subclass.

    Args:
        name: Key in REGISTRY_BINDINGS
        **kwargs: Passed to the binding's constructor

    Raises:
        RegistryError: If the name is unknown or the binding fails to import
    """
    if name not in REGISTRY_BINDINGS:
        raise RegistryError(f"Unknown registry binding: {name}")

    try:
        module = importlib.import_module(REGISTRY_BINDINGS[name])
        registry_class = getattr(module, "REGISTRY_CLASS")
    except (ImportError, AttributeError) as e:
        raise RegistryError(f"Failed to load registry binding {name}: {e}") from e

    logger.info(f"Loaded registry binding: {name}")
    return registry_class(**kwargs)


class ClassLister:
    """Primes the environment, runs discovery and resolves the class list."""

    def __init__(
        self,
        registry: BaseRegistry,
        environment: Environment | None = None,
        quiet: bool = False,
        reporter=None,
    ):
        """
        Initialize lister.

        Args:
            registry: Binding that performs discovery and exposes its maps
            environment: Store to publish settings into (system-wide if None)
            quiet: Suppress console output, for use as a library query
            reporter: Object with a ``report(result)`` method (TextReporter if None)
        """
        self.registry = registry
        if environment is None:
            environment = Environment.system_wide()
        self.environment = environment
        self.quiet = quiet
        self.reporter = reporter or TextReporter()

    def list_classes(self, options: ListerOptions) -> ListingResult:
        """
        Resolve the sorted list of names for the given options.

        Args:
            options: Parsed lister options

        Returns:
            ListingResult with sorted names

        Raises:
            UnknownSuperclassError: If options.super_class is not registered
            RegistryError: If the binding fails to run discovery
        """
        publish(options, self.environment)

        start_time = time.time()
        self.registry.determine_classes(self.environment)
        logger.info(f"Determined classes in {time.time() - start_time:.2f}s")

        if options.resources:
            hierarchy = self.registry.get_resources()
        else:
            hierarchy = self.registry.get_plugins()

        if not options.super_class:
            return ListingResult(
                resources=options.resources,
                entries={name: "" for name in hierarchy},
            )

        if options.super_class not in hierarchy:
            raise UnknownSuperclassError(options.super_class)

        entries = dict(hierarchy[options.super_class])
        if options.exclude_disabled:
            disabled = self.registry.get_disabled()
            skipped = [name for name in entries if name in disabled]
            for name in skipped:
                del entries[name]
            if skipped:
                logger.info(f"Skipped {len(skipped)} disabled class(es)")

        return ListingResult(
            super_class=options.super_class,
            resources=options.resources,
            entries=entries,
        )

    def execute(self, options: ListerOptions) -> ListingResult:
        """
        Resolve the class list and print it unless quiet.

        Nothing is printed when resolution fails.
        """
        result = self.list_classes(options)
        logger.info(f"Resolved {len(result.names)} name(s)")

        if not self.quiet:
            self.reporter.report(result)

        return result


def list_classes(
    options: Optional[ListerOptions] = None,
    registry: Optional[BaseRegistry] = None,
    environment: Optional[Environment] = None,
) -> list[str]:
    """Quiet convenience query returning just the sorted names."""
    lister = ClassLister(
        registry or load_registry(),
        environment=environment,
        quiet=True,
    )
    return lister.execute(options or ListerOptions()).names
