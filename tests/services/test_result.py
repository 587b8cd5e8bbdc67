"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from cfurl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="open", data={"url": "https://dash.cloudflare.com"})
        assert result.ok is True
        assert result.op == "open"
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="LAUNCH_FAILED", message="no handler")
        result = ServiceResult(ok=False, op="open", error=error)
        assert result.error is not None
        assert result.error.code == "LAUNCH_FAILED"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="resolve", data={"url": "u"})
        parsed = json.loads(result.model_dump_json())
        assert parsed == {
            "ok": True,
            "op": "resolve",
            "data": {"url": "u"},
            "error": None,
        }

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="open")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
