"""Tests for the IdiomCatalog aggregate: ordering, lookup, and uniqueness."""

import pytest
from pydantic import ValidationError

from idiom_catalog.catalog.domain.catalog import IdiomCatalog
from idiom_catalog.catalog.domain.errors import NotFoundError
from tests.catalog.builders import make_catalog, make_entry


class TestListTopics:
    """list_topics returns authored order, every call."""

    def test_returns_names_in_authored_order(self) -> None:
        catalog = make_catalog()

        assert catalog.list_topics() == ["slice", "select", "filter", "arrange"]

    def test_repeated_calls_return_same_order(self) -> None:
        catalog = make_catalog()

        first = catalog.list_topics()
        for _ in range(5):
            assert catalog.list_topics() == first

    def test_returned_list_is_a_fresh_copy(self) -> None:
        catalog = make_catalog()

        names = catalog.list_topics()
        names.reverse()

        assert catalog.list_topics() == ["slice", "select", "filter", "arrange"]

    def test_empty_catalog_lists_nothing(self) -> None:
        catalog = IdiomCatalog(name="empty", title="Empty")

        assert catalog.list_topics() == []
        assert len(catalog) == 0


class TestGetTopic:
    """get_topic returns the stored entry or raises NotFoundError."""

    def test_round_trip_returns_same_entry_for_every_name(self) -> None:
        catalog = make_catalog()

        for entry in catalog.entries:
            assert catalog.get_topic(entry.name) is entry

    def test_unknown_name_raises_not_found_error(self) -> None:
        with pytest.raises(NotFoundError):
            make_catalog().get_topic("nonexistent_topic")

    def test_not_found_error_carries_name_and_catalog(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            make_catalog().get_topic("nonexistent_topic")

        assert exc_info.value.name == "nonexistent_topic"
        assert exc_info.value.catalog == "fixture"

    def test_lookup_is_case_sensitive(self) -> None:
        with pytest.raises(NotFoundError):
            make_catalog().get_topic("Slice")


class TestCatalogInvariants:
    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_catalog(entries=(make_entry(name="slice"), make_entry(name="slice")))

        assert "duplicate topic name(s): slice" in str(exc_info.value)

    def test_all_duplicates_reported_together(self) -> None:
        entries = (
            make_entry(name="slice"),
            make_entry(name="select"),
            make_entry(name="slice"),
            make_entry(name="select"),
        )
        with pytest.raises(ValidationError) as exc_info:
            make_catalog(entries=entries)

        assert "slice, select" in str(exc_info.value)

    def test_dataset_is_fixed_to_mtcars(self) -> None:
        with pytest.raises(ValidationError):
            IdiomCatalog.model_validate(
                {"name": "iris", "title": "Iris", "dataset": "iris"}
            )

    def test_dataset_defaults_to_mtcars(self) -> None:
        assert make_catalog().dataset == "mtcars"

    def test_catalog_is_frozen(self) -> None:
        catalog = make_catalog()
        with pytest.raises(ValidationError):
            catalog.name = "other"  # type: ignore[misc]

    def test_len_counts_entries(self) -> None:
        assert len(make_catalog()) == 4
