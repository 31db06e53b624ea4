"""
Unit Tests: SeedService

Tests first-boot seeding of the products table:
- Idempotent restarts (fixture never read once products exist)
- Missing, unparsable or non-array fixtures are logged and skipped
- The bundled menu fixture loads completely

Run with:
    pytest tests/seed/unit/test_seed_service.py -v
"""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

import config
from services.product import ProductService
from services.seed import SeedService, to_product_create_dto, get_products_fixture_path

BUNDLED_FIXTURE = Path(__file__).parent.parent.parent.parent / "data" / "products.json"


class TestSeedProducts:
    """Test SeedService.seed_products()"""

    @pytest.mark.asyncio
    async def test_seeds_bundled_fixture_into_empty_table(self, test_session, monkeypatch):
        monkeypatch.setattr(config, "PRODUCTS_FIXTURE_PATH", str(BUNDLED_FIXTURE))
        expected_count = len(json.loads(BUNDLED_FIXTURE.read_text(encoding="utf-8")))

        await SeedService.seed_products(test_session)

        assert await ProductService.count(test_session) == expected_count

    @pytest.mark.asyncio
    async def test_second_run_does_not_duplicate(self, test_session, monkeypatch):
        monkeypatch.setattr(config, "PRODUCTS_FIXTURE_PATH", str(BUNDLED_FIXTURE))

        await SeedService.seed_products(test_session)
        first_count = await ProductService.count(test_session)
        await SeedService.seed_products(test_session)

        assert await ProductService.count(test_session) == first_count

    @pytest.mark.asyncio
    async def test_fixture_never_read_when_products_exist(self, test_session, sample_products, caplog):
        with patch('services.seed.get_products_fixture_path') as mock_fixture_path:
            with caplog.at_level(logging.INFO, logger="services.seed"):
                await SeedService.seed_products(test_session)

        mock_fixture_path.assert_not_called()
        assert await ProductService.count(test_session) == len(sample_products)
        assert "already exist" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_fixture_is_skipped(self, test_session, tmp_path, monkeypatch, caplog):
        monkeypatch.setattr(config, "PRODUCTS_FIXTURE_PATH", str(tmp_path / "missing.json"))

        with caplog.at_level(logging.ERROR, logger="services.seed"):
            await SeedService.seed_products(test_session)

        assert await ProductService.count(test_session) == 0
        assert "not found" in caplog.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["not json at all", '{"name": "Espresso"}', "null"])
    async def test_unparsable_or_non_array_fixture_is_skipped(self, content, test_session, tmp_path, monkeypatch, caplog):
        fixture = tmp_path / "products.json"
        fixture.write_text(content, encoding="utf-8")
        monkeypatch.setattr(config, "PRODUCTS_FIXTURE_PATH", str(fixture))

        with caplog.at_level(logging.ERROR, logger="services.seed"):
            await SeedService.seed_products(test_session)

        assert await ProductService.count(test_session) == 0
        assert "invalid or failed to parse" in caplog.text

    @pytest.mark.asyncio
    async def test_entries_with_unexpected_shape_are_skipped(self, test_session, tmp_path, monkeypatch):
        fixture = tmp_path / "products.json"
        fixture.write_text(json.dumps([{"name": "Espresso"}, "not an object"]), encoding="utf-8")
        monkeypatch.setattr(config, "PRODUCTS_FIXTURE_PATH", str(fixture))

        await SeedService.seed_products(test_session)

        assert await ProductService.count(test_session) == 0

    @pytest.mark.asyncio
    async def test_seed_all_uses_own_session(self, test_session_maker, monkeypatch):
        monkeypatch.setattr(config, "PRODUCTS_FIXTURE_PATH", str(BUNDLED_FIXTURE))

        await SeedService.seed_all()

        async with test_session_maker() as session:
            assert await ProductService.count(session) > 0


class TestFixtureMapping:
    """Test to_product_create_dto() and get_products_fixture_path()"""

    def test_missing_and_null_discount_price_become_none(self):
        base = {"name": "Tea", "description": "Hot", "price": "3.00", "category": "tea"}

        assert to_product_create_dto(base).discount_price is None
        assert to_product_create_dto({**base, "discountPrice": None}).discount_price is None
        assert to_product_create_dto({**base, "discountPrice": "2.50"}).discount_price == "2.50"

    def test_sizes_and_additives_default_to_empty(self):
        dto = to_product_create_dto({"name": "Tea", "description": "Hot", "price": "3.00", "category": "tea"})

        assert dto.sizes == {}
        assert dto.additives == []

    def test_relative_fixture_path_resolves_against_project_root(self, monkeypatch):
        monkeypatch.setattr(config, "PRODUCTS_FIXTURE_PATH", "data/products.json")

        assert get_products_fixture_path().resolve() == BUNDLED_FIXTURE.resolve()
