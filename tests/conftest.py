"""Shared pytest fixtures for list-weka-classes tests."""

import textwrap

import pytest

from list_weka_classes.core.environment import LOAD_PACKAGES, OFFLINE, Environment
from list_weka_classes.core.registry import BaseRegistry


class FakeRegistry(BaseRegistry):
    """In-memory registry that records how discovery was invoked."""

    def __init__(self, plugins=None, resources=None, disabled=None):
        self.plugins = plugins or {}
        self.resources = resources or {}
        self.disabled = set(disabled or [])
        self.calls = []

    def determine_classes(self, environment):
        self.calls.append(
            {
                "offline": environment.get_variable(OFFLINE),
                "load_packages": environment.get_variable(LOAD_PACKAGES),
            }
        )

    def get_plugins(self):
        return self.plugins

    def get_resources(self):
        return self.resources

    def get_disabled(self):
        return self.disabled


@pytest.fixture
def weka_plugins():
    """Two extension points as the registry holds them after discovery."""
    return {
        "weka.filters.Filter": {"Standardize": "weka.filters.unsupervised.attribute.Standardize"},
        "weka.classifiers.Classifier": {
            "NaiveBayes": "weka.classifiers.bayes.NaiveBayes",
            "J48": "weka.classifiers.trees.J48",
        },
    }


@pytest.fixture
def fake_registry(weka_plugins):
    """Registry with classifiers, filters, one resource group and a disabled class."""
    return FakeRegistry(
        plugins=weka_plugins,
        resources={"look_and_feel": {"Metal": "javax.swing.plaf.metal.MetalLookAndFeel"}},
        disabled={"NaiveBayes"},
    )


@pytest.fixture
def environment():
    """Fresh environment, isolated from the system-wide one."""
    return Environment()


@pytest.fixture
def fresh_system_environment(monkeypatch):
    """Reset the system-wide environment for the duration of a test."""
    monkeypatch.setattr(Environment, "_system_wide", None)


@pytest.fixture
def weka_catalog(tmp_path):
    """Catalog file matching the classifier/filter example."""
    catalog = tmp_path / "catalog.yaml"
    catalog.write_text(
        textwrap.dedent(
            """\
            plugins:
              weka.classifiers.Classifier:
                J48: weka.classifiers.trees.J48
                NaiveBayes: weka.classifiers.bayes.NaiveBayes
              weka.filters.Filter:
                Standardize: weka.filters.unsupervised.attribute.Standardize
            resources:
              look_and_feel:
                Metal: javax.swing.plaf.metal.MetalLookAndFeel
            disabled:
              - NaiveBayes
            """
        )
    )
    return catalog


@pytest.fixture
def list_catalog(tmp_path):
    """Catalog using plain lists for implementations."""
    catalog = tmp_path / "list_catalog.yaml"
    catalog.write_text(
        textwrap.dedent(
            """\
            plugins:
              weka.core.converters.Loader:
                - weka.core.converters.CSVLoader
                - weka.core.converters.ArffLoader
              weka.core.converters.Saver:
            """
        )
    )
    return catalog


@pytest.fixture
def malformed_catalog(tmp_path):
    """Catalog with invalid YAML."""
    catalog = tmp_path / "broken.yaml"
    catalog.write_text("plugins: {weka.filters.Filter: [Standardize\n")
    return catalog


@pytest.fixture
def registry_class():
    """The in-memory registry class, for tests that build their own."""
    return FakeRegistry
