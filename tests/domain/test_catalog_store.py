"""Tests for CatalogStore construction, lookups and copy-on-write stock toggling."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from dealership_lite.domain.catalog import CatalogStore, search_inventory
from dealership_lite.domain.errors import NotFoundError, ValidationError
from dealership_lite.domain.vehicle import Vehicle


def make_vehicle(vehicle_id: str, **overrides) -> Vehicle:
    fields = dict(
        id=vehicle_id,
        name=f"Model {vehicle_id}",
        brand="Tesla",
        price=Decimal("50000"),
        year=2023,
        fuel_type="Electric",
        transmission="Automatic",
        engine="Dual Motor",
        horsepower=400,
        mileage=0,
        exterior_color="White",
        interior_color="Black",
        body_type="Sedan",
        description="Test vehicle",
        features=("Autopilot",),
        in_stock=True,
        image=f"img-{vehicle_id}",
        gallery=(f"img-{vehicle_id}",),
    )
    fields.update(overrides)
    return Vehicle(**fields)


# ==============================================================================
# Construction
# ==============================================================================


def test_store_keeps_insertion_order() -> None:
    store = CatalogStore([make_vehicle("b"), make_vehicle("a"), make_vehicle("c")])

    assert [v.id for v in store.vehicles] == ["b", "a", "c"]
    assert len(store) == 3


def test_store_rejects_duplicate_ids() -> None:
    with pytest.raises(ValidationError, match="Duplicate vehicle id 'a'"):
        CatalogStore([make_vehicle("a"), make_vehicle("a")])


def test_store_rejects_negative_price() -> None:
    with pytest.raises(ValidationError, match="price must be >= 0"):
        CatalogStore([make_vehicle("a", price=Decimal("-1"))])


def test_store_rejects_negative_mileage() -> None:
    with pytest.raises(ValidationError, match="mileage must be >= 0"):
        CatalogStore([make_vehicle("a", mileage=-5)])


def test_store_rejects_empty_gallery() -> None:
    with pytest.raises(ValidationError, match="at least one image"):
        CatalogStore([make_vehicle("a", gallery=())])


def test_store_rejects_gallery_without_primary_image() -> None:
    with pytest.raises(ValidationError, match="primary image"):
        CatalogStore([make_vehicle("a", gallery=("other",))])


def test_empty_store_is_valid() -> None:
    store = CatalogStore([])

    assert store.vehicles == ()
    assert store.distinct_brands() == ()
    assert store.price_bounds() is None


# ==============================================================================
# Derived sets
# ==============================================================================


def test_distinct_brands_first_appearance_order(sample_store: CatalogStore) -> None:
    assert sample_store.distinct_brands() == (
        "Tesla",
        "Audi",
        "BMW",
        "Porsche",
        "Ford",
        "Land Rover",
    )


def test_distinct_fuel_types_has_no_duplicates(sample_store: CatalogStore) -> None:
    assert sample_store.distinct_fuel_types() == ("Electric", "Petrol", "Hybrid", "Diesel")


def test_distinct_values_are_computed_once(sample_store: CatalogStore) -> None:
    assert sample_store.distinct_brands() is sample_store.distinct_brands()


def test_price_bounds(sample_store: CatalogStore) -> None:
    assert sample_store.price_bounds() == (Decimal("39900"), Decimal("101200"))


# ==============================================================================
# Lookups
# ==============================================================================


def test_get_by_id(sample_store: CatalogStore) -> None:
    vehicle = sample_store.get_by_id("4")

    assert vehicle is not None
    assert vehicle.display_name == "Porsche 911"


def test_get_by_id_unknown_returns_none(sample_store: CatalogStore) -> None:
    assert sample_store.get_by_id("999") is None


def test_in_stock_excludes_mustang(sample_store: CatalogStore) -> None:
    assert [v.id for v in sample_store.in_stock()] == ["1", "2", "3", "4", "6"]


def test_featured_returns_first_three_in_stock(sample_store: CatalogStore) -> None:
    assert [v.id for v in sample_store.featured()] == ["1", "2", "3"]


def test_featured_skips_out_of_stock_vehicles() -> None:
    store = CatalogStore(
        [
            make_vehicle("a", in_stock=False),
            make_vehicle("b"),
            make_vehicle("c", in_stock=False),
            make_vehicle("d"),
        ]
    )

    assert [v.id for v in store.featured(limit=3)] == ["b", "d"]


# ==============================================================================
# Copy-on-write stock toggle
# ==============================================================================


def test_with_stock_toggled_returns_new_store(sample_store: CatalogStore) -> None:
    toggled = sample_store.with_stock_toggled("5")

    assert toggled is not sample_store
    assert toggled.get_by_id("5").in_stock is True


def test_with_stock_toggled_leaves_original_untouched(sample_store: CatalogStore) -> None:
    before = sample_store.vehicles

    sample_store.with_stock_toggled("1")

    assert sample_store.vehicles == before
    assert sample_store.get_by_id("1").in_stock is True


def test_with_stock_toggled_twice_restores_flag(sample_store: CatalogStore) -> None:
    twice = sample_store.with_stock_toggled("2").with_stock_toggled("2")

    assert twice.vehicles == sample_store.vehicles


def test_with_stock_toggled_only_changes_target(sample_store: CatalogStore) -> None:
    toggled = sample_store.with_stock_toggled("3")

    for original, updated in zip(sample_store.vehicles, toggled.vehicles):
        if original.id == "3":
            assert updated == replace(original, in_stock=False)
        else:
            assert updated is original


def test_with_stock_toggled_unknown_id(sample_store: CatalogStore) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        sample_store.with_stock_toggled("999")

    assert exc_info.value.context["identifier"] == "999"


# ==============================================================================
# Admin inventory search
# ==============================================================================


def test_search_inventory_matches_brand_or_name(sample_store: CatalogStore) -> None:
    assert [v.id for v in search_inventory(sample_store, "ROVER")] == ["6"]
    assert [v.id for v in search_inventory(sample_store, "model")] == ["1"]


def test_search_inventory_blank_term_returns_everything(sample_store: CatalogStore) -> None:
    assert search_inventory(sample_store, "   ") == sample_store.vehicles
