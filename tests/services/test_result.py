"""Tests for ServiceResult and ServiceError."""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from pieshop.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="add_item", data={"quantity": 1})
        assert result.ok is True
        assert result.op == "add_item"
        assert result.data == {"quantity": 1}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_FOUND", message="No pie")
        result = ServiceResult(ok=False, op="get_pie", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("get_pie", "NOT_FOUND", "No pie", pie_id=9)
        assert result.ok is False
        assert result.op == "get_pie"
        expected = ServiceError(code="NOT_FOUND", message="No pie", detail={"pie_id": 9})
        assert result.error == expected

    def test_decimal_serializes_as_string(self) -> None:
        result = ServiceResult(ok=True, op="total", data={"total": Decimal("50.85")})
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"]["total"] == "50.85"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="total")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
