"""Pytest configuration and shared fixtures for Card Offers tests."""

import json

import pytest

from card_offers.catalog import Catalog, default_catalog
from card_offers.core.types import CatalogEntry, Condition
from card_offers.match.matcher import CatalogMatcher
from card_offers.pricing.offer import OfferPricer
from card_offers.process.processor import FragmentProcessor


@pytest.fixture(scope="function")
def catalog():
    """The built-in six-entry catalog."""
    return default_catalog()


@pytest.fixture(scope="function")
def charizard(catalog):
    return catalog.get(1)


@pytest.fixture(scope="function")
def nm_only_catalog():
    """Catalog whose only entry is offered in Near Mint condition alone."""
    return Catalog([
        CatalogEntry(
            id=1,
            name="Charizard",
            set_name="Base Set",
            number="4/102",
            market_price=450.00,
            supported_conditions=frozenset({Condition.NEAR_MINT}),
        )
    ])


@pytest.fixture(scope="function")
def processor(catalog):
    """Sequential processor with explicit threshold and ratio."""
    return FragmentProcessor(
        catalog=catalog,
        matcher=CatalogMatcher(min_score=2),
        pricer=OfferPricer(offer_ratio=0.7),
        max_workers=1,
    )


@pytest.fixture(scope="function")
def catalog_records():
    """Catalog JSON records as a catalog file would hold them."""
    return [
        {"id": 10, "name": "Mewtwo", "set": "Base Set", "number": "10/102", "marketPrice": 60.0},
        {"id": 11, "name": "Gengar", "set": "Fossil", "number": "5/62", "marketPrice": 75.5,
         "supportedConditions": ["Near Mint", "Lightly Played"]},
    ]


@pytest.fixture(scope="function")
def catalog_file(tmp_path, catalog_records):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_records), encoding="utf-8")
    return path


@pytest.fixture(scope="function")
def sample_ocr_annotations():
    """Vision-style annotations for one photographed card."""
    return [
        {"description": "Charizard VMAX",
         "boundingPoly": {"vertices": [{"x": 50, "y": 30}, {"x": 250, "y": 30}, {"x": 250, "y": 70}, {"x": 50, "y": 70}]}},
        {"description": "Champion's Path",
         "boundingPoly": {"vertices": [{"x": 50, "y": 80}, {"x": 200, "y": 80}, {"x": 200, "y": 105}, {"x": 50, "y": 105}]}},
        {"description": "74/73",
         "boundingPoly": {"vertices": [{"x": 200, "y": 300}, {"x": 260, "y": 300}, {"x": 260, "y": 320}, {"x": 200, "y": 320}]}},
        {"description": "Near Mint",
         "boundingPoly": {"vertices": [{"x": 50, "y": 350}, {"x": 150, "y": 350}, {"x": 150, "y": 370}, {"x": 50, "y": 370}]}},
    ]


# Configure pytest options
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Mark CLI and end-to-end tests as integration, everything else as unit."""
    for item in items:
        if "integration" in item.name.lower() or item.fspath.basename == "test_cli.py":
            item.add_marker(pytest.mark.integration)

        if not item.get_closest_marker('integration'):
            item.add_marker(pytest.mark.unit)
