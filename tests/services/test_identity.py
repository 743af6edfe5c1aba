"""Tests for cart identity resolution."""

import logging
from pathlib import Path

import pytest

from pieshop.domain.ids import validate_cart_id
from pieshop.infrastructure.session import open_session
from pieshop.services.identity import CART_SESSION_KEY, forget_cart_id, resolve_cart_id


class TestResolveCartId:
    def test_existing_id_returned_unchanged(self) -> None:
        session = {"CartId": "abc"}
        assert resolve_cart_id(session) == "abc"
        assert session == {"CartId": "abc"}

    def test_mints_and_stores_on_first_contact(self) -> None:
        session: dict[str, str] = {}
        cart_id = resolve_cart_id(session)
        assert validate_cart_id(cart_id)
        assert session[CART_SESSION_KEY] == cart_id

    def test_idempotent_within_session(self) -> None:
        session: dict[str, str] = {}
        first = resolve_cart_id(session)
        assert resolve_cart_id(session) == first
        assert resolve_cart_id(session) == first

    def test_different_sessions_get_different_ids(self) -> None:
        assert resolve_cart_id({}) != resolve_cart_id({})

    def test_empty_string_is_kept(self) -> None:
        """Any present value is trusted, even an empty one."""
        assert resolve_cart_id({"CartId": ""}) == ""

    def test_foreign_id_is_trusted_and_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="pieshop.services.identity")
        assert resolve_cart_id({"CartId": "legacy-42"}) == "legacy-42"
        assert "not minted here" in caplog.text
        assert "legacy-42" in caplog.text

    def test_minted_id_is_not_logged_as_foreign(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="pieshop.services.identity")
        session: dict[str, str] = {}
        resolve_cart_id(session)
        caplog.clear()
        resolve_cart_id(session)
        assert "not minted here" not in caplog.text

    def test_custom_key(self) -> None:
        session: dict[str, str] = {}
        cart_id = resolve_cart_id(session, key="basket")
        assert session == {"basket": cart_id}

    def test_persists_through_file_session(self, tmp_path: Path) -> None:
        cart_id = resolve_cart_id(open_session(tmp_path, "default"))
        assert resolve_cart_id(open_session(tmp_path, "default")) == cart_id


class TestForgetCartId:
    def test_forget_then_resolve_mints_new(self) -> None:
        session: dict[str, str] = {}
        first = resolve_cart_id(session)
        assert forget_cart_id(session) == first
        assert resolve_cart_id(session) != first

    def test_forget_without_id(self) -> None:
        assert forget_cart_id({}) is None
