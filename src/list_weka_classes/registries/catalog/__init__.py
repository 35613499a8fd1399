"""YAML catalog registry binding."""

from .registry import CatalogRegistry

# Registry class exposed for lister discovery
REGISTRY_CLASS = CatalogRegistry

__all__ = ["CatalogRegistry", "REGISTRY_CLASS"]
