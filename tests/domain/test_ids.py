"""Tests for cart id minting and validation."""

from __future__ import annotations

from pieshop.domain.ids import CART_ID_PATTERN, generate_cart_id, validate_cart_id


class TestGenerateCartId:
    def test_matches_uuid4_pattern(self) -> None:
        assert CART_ID_PATTERN.match(generate_cart_id())

    def test_ids_are_unique(self) -> None:
        ids = {generate_cart_id() for _ in range(200)}
        assert len(ids) == 200


class TestValidateCartId:
    def test_valid(self) -> None:
        assert validate_cart_id("3f2c9a4e-8b1d-4c7a-9e5f-0a1b2c3d4e5f")

    def test_rejects_uppercase(self) -> None:
        assert not validate_cart_id("3F2C9A4E-8B1D-4C7A-9E5F-0A1B2C3D4E5F")

    def test_rejects_non_v4(self) -> None:
        assert not validate_cart_id("3f2c9a4e-8b1d-1c7a-9e5f-0a1b2c3d4e5f")

    def test_rejects_garbage(self) -> None:
        assert not validate_cart_id("not-a-cart")
