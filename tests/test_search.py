"""Tests for the filter and sort engine."""

import itertools
import math

import pytest

from immo_catalog.models import Amenity, FilterCriteria, PropertyCategory, SortKey, TransactionKind
from immo_catalog.search import failed_predicates, filter_properties, matches, sort_properties
from immo_catalog.store import PropertyStore


def ids(properties) -> list[str]:
    return [p.property_id for p in properties]


class TestFilterPredicates:
    """Tests for individual filter predicates."""

    def test_no_criteria_returns_everything(self, store: PropertyStore) -> None:
        result = filter_properties(store, FilterCriteria())
        assert sorted(ids(result)) == sorted(ids(store))

    def test_category(self, store: PropertyStore) -> None:
        result = filter_properties(store, FilterCriteria(category=PropertyCategory.VILLA))
        assert ids(result) == ["prop-1", "prop-6"]

    def test_transaction(self, store: PropertyStore) -> None:
        result = filter_properties(store, FilterCriteria(transaction=TransactionKind.RENTAL))
        assert ids(result) == ["prop-2", "prop-6"]

    def test_neighborhood_and_category_combined(self, store: PropertyStore) -> None:
        criteria = FilterCriteria(neighborhood="plateau", category=PropertyCategory.OFFICE)
        assert ids(filter_properties(store, criteria)) == ["prop-4"]

    def test_price_range_is_inclusive(self, store: PropertyStore) -> None:
        criteria = FilterCriteria(min_price=90_000_000, max_price=90_000_000)
        assert ids(filter_properties(store, criteria)) == ["prop-5", "prop-3"]

    def test_area_upper_bound(self, store: PropertyStore) -> None:
        assert ids(filter_properties(store, FilterCriteria(max_area=100))) == ["prop-2"]

    def test_minimum_rooms(self, store: PropertyStore) -> None:
        result = filter_properties(store, FilterCriteria(min_rooms=4))
        assert ids(result) == ["prop-4", "prop-1", "prop-6"]

    def test_amenities_require_all(self, store: PropertyStore) -> None:
        """Every checked amenity is required, not any of them."""
        one = filter_properties(store, FilterCriteria(amenities=frozenset({Amenity.POOL})))
        both = filter_properties(
            store, FilterCriteria(amenities=frozenset({Amenity.POOL, Amenity.SECURITY}))
        )

        assert ids(one) == ["prop-5", "prop-1"]
        assert ids(both) == ["prop-1"]

    def test_amenity_scenario(self, property_factory) -> None:
        """{pool} excludes a {parking, security} listing and includes a {pool, garden} one."""
        store = PropertyStore.load(
            [
                property_factory("a", amenities={Amenity.PARKING, Amenity.SECURITY}),
                property_factory("b", amenities={Amenity.POOL, Amenity.GARDEN}),
            ]
        )

        result = filter_properties(store, FilterCriteria(amenities=frozenset({Amenity.POOL})))

        assert ids(result) == ["b"]

    def test_query_matches_neighborhood_name_case_insensitively(self, store: PropertyStore) -> None:
        assert ids(filter_properties(store, FilterCriteria(query="PLATEAU"))) == ["prop-4", "prop-2"]

    def test_query_matches_description(self, store: PropertyStore) -> None:
        assert ids(filter_properties(store, FilterCriteria(query="sea view"))) == ["prop-1"]

    def test_query_matches_accented_display_name(self, property_factory) -> None:
        store = PropertyStore.load(
            [property_factory("a", title="Quiet flat", neighborhood="sacre-coeur")]
        )
        assert ids(filter_properties(store, FilterCriteria(query="sacré-cœur"))) == ["a"]

    def test_blank_query_is_no_constraint(self, store: PropertyStore) -> None:
        assert len(filter_properties(store, FilterCriteria(query="   "))) == len(store)

    def test_zero_matches_is_empty_list(self, store: PropertyStore) -> None:
        result = filter_properties(store, FilterCriteria(query="no such listing"))
        assert result == []

    def test_failed_predicates_names_violations(self, store: PropertyStore) -> None:
        prop = store.get("prop-2")
        criteria = FilterCriteria(transaction=TransactionKind.SALE, min_rooms=3)
        assert failed_predicates(prop, criteria, store) == ["transaction", "rooms"]


class TestSorting:
    """Tests for result ordering."""

    def test_default_is_newest_first_with_stable_ties(self, store: PropertyStore) -> None:
        result = filter_properties(store, FilterCriteria())
        assert ids(result) == ["prop-4", "prop-2", "prop-5", "prop-1", "prop-3", "prop-6"]

    def test_price_ascending(self, store: PropertyStore) -> None:
        result = filter_properties(store, FilterCriteria(sort=SortKey.PRICE_ASC))
        assert ids(result) == ["prop-2", "prop-6", "prop-3", "prop-5", "prop-1", "prop-4"]

    def test_price_descending_keeps_ties_in_input_order(self, store: PropertyStore) -> None:
        result = filter_properties(store, FilterCriteria(sort=SortKey.PRICE_DESC))
        assert ids(result) == ["prop-4", "prop-1", "prop-3", "prop-5", "prop-6", "prop-2"]

    def test_area_descending(self, store: PropertyStore) -> None:
        result = filter_properties(store, FilterCriteria(sort=SortKey.AREA_DESC))
        assert ids(result) == ["prop-3", "prop-1", "prop-6", "prop-4", "prop-5", "prop-2"]

    def test_price_scenario(self, property_factory) -> None:
        """Prices [100, 50, 200] sorted ascending come out [50, 100, 200]."""
        store = PropertyStore.load(
            [
                property_factory("a", price=100),
                property_factory("b", price=50),
                property_factory("c", price=200),
            ]
        )
        result = filter_properties(store, FilterCriteria(sort=SortKey.PRICE_ASC))
        assert [p.price for p in result] == [50, 100, 200]

    def test_sort_from_raw_string(self, store: PropertyStore) -> None:
        result = filter_properties(store, FilterCriteria(sort="area-desc"))
        assert ids(result)[0] == "prop-3"

    def test_sort_properties_does_not_mutate_input(self, store: PropertyStore) -> None:
        original = list(store)
        sort_properties(original, SortKey.PRICE_ASC)
        assert original == list(store)


class TestEngineProperties:
    """Soundness, completeness and determinism over many criteria."""

    CRITERIA = [
        FilterCriteria(category=category, transaction=transaction, min_rooms=rooms, amenities=amenities, sort=sort)
        for category, transaction, rooms, amenities, sort in itertools.product(
            [None, PropertyCategory.VILLA, PropertyCategory.LAND],
            [None, TransactionKind.SALE],
            [0, 3],
            [frozenset(), frozenset({Amenity.GARDEN}), frozenset({Amenity.PARKING, Amenity.SECURITY})],
            list(SortKey),
        )
    ] + [
        FilterCriteria(query="villa", min_price=1_000_000, max_price=300_000_000),
        FilterCriteria(min_area=100, max_area=math.inf, neighborhood="plateau"),
    ]

    @pytest.mark.parametrize("criteria", CRITERIA)
    def test_sound_and_complete(self, store: PropertyStore, criteria: FilterCriteria) -> None:
        result = filter_properties(store, criteria)
        selected = set(ids(result))

        for prop in store:
            if prop.property_id in selected:
                assert failed_predicates(prop, criteria, store) == []
            else:
                assert not matches(prop, criteria, store)

    @pytest.mark.parametrize("sort", list(SortKey))
    def test_deterministic(self, store: PropertyStore, sort: SortKey) -> None:
        criteria = FilterCriteria(sort=sort)
        assert filter_properties(store, criteria) == filter_properties(store, criteria)

    def test_price_order_matches_comparator(self, store: PropertyStore) -> None:
        prices = [p.price for p in filter_properties(store, FilterCriteria(sort=SortKey.PRICE_ASC))]
        assert prices == sorted(prices)
