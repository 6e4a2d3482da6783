"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from jesus_menu.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="open_menu", data={"meal": "lunch"})
        assert result.ok is True
        assert result.data == {"meal": "lunch"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_DATE", message="Invalid date: Invalid day")
        result = ServiceResult(ok=False, op="open_menu", error=error)
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="formal_notice", data={"date": "2024-03-14"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["op"] == "formal_notice"
        assert parsed["data"]["date"] == "2024-03-14"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="open_menu")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
