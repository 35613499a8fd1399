"""Tests for core data models."""

import json

import pytest
from pydantic import ValidationError

from list_weka_classes.core.models import (
    ListerOptions,
    ListingResult,
    OutputFormat,
    RegistrySnapshot,
)


class TestOutputFormat:
    """Tests for OutputFormat enum."""

    def test_format_values(self):
        assert OutputFormat.TEXT.value == "text"
        assert OutputFormat.JSON.value == "json"
        assert OutputFormat.TABLE.value == "table"

    def test_format_from_string(self):
        assert OutputFormat("table") is OutputFormat.TABLE


class TestListerOptions:
    """Tests for ListerOptions model."""

    def test_defaults(self):
        """Test that defaults list all superclasses without packages."""
        options = ListerOptions()

        assert options.offline is False
        assert options.load_packages is False
        assert options.super_class == ""
        assert options.resources is False
        assert options.exclude_disabled is False

    def test_none_super_class_becomes_empty(self):
        options = ListerOptions(super_class=None)

        assert options.super_class == ""

    def test_super_class_kept_verbatim(self):
        options = ListerOptions(super_class="  weka.filters.Filter ")

        assert options.super_class == "  weka.filters.Filter "

    def test_options_are_immutable(self):
        """Test that parsed options cannot be changed."""
        options = ListerOptions(offline=True)

        with pytest.raises(ValidationError):
            options.offline = False


class TestRegistrySnapshot:
    """Tests for RegistrySnapshot model."""

    def test_empty_snapshot(self):
        snapshot = RegistrySnapshot()

        assert snapshot.plugins == {}
        assert snapshot.resources == {}
        assert snapshot.disabled == set()

    def test_disabled_serialized_sorted(self):
        snapshot = RegistrySnapshot(disabled={"b", "a", "c"})

        data = json.loads(snapshot.model_dump_json())

        assert data["disabled"] == ["a", "b", "c"]


class TestListingResult:
    """Tests for ListingResult model."""

    def test_names_derived_from_entries_sorted(self):
        """Test that names are sorted by code point."""
        result = ListingResult(entries={"b": "", "B": "", "a": "", "_x": ""})

        assert result.names == ["B", "_x", "a", "b"]

    def test_names_deduplicated(self):
        result = ListingResult(names=["J48", "J48", "NaiveBayes"], entries={"J48": "x"})

        assert result.names == ["J48", "NaiveBayes"]

    def test_lists_superclasses_when_no_super_class(self):
        assert ListingResult().lists_superclasses is True
        assert ListingResult(super_class="weka.filters.Filter").lists_superclasses is False

    def test_metadata_lookup(self):
        result = ListingResult(
            super_class="weka.classifiers.Classifier",
            entries={"J48": "weka.classifiers.trees.J48"},
        )

        assert result.metadata("J48") == "weka.classifiers.trees.J48"
        assert result.metadata("ZeroR") is None

    def test_json_round_trip_keeps_order(self):
        result = ListingResult(entries={"z": "", "a": ""})

        data = json.loads(result.model_dump_json())

        assert data["names"] == ["a", "z"]
