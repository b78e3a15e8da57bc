import pytest
from fastapi import HTTPException

from chartcanvas.exceptions import EmptyResource, FetchError, InvalidConfiguration, MissingColumn
from chartcanvas.utils.error_handling import handle_error, handle_load_error


def test_handle_error_configuration_errors():
    for error in (MissingColumn("sales"), EmptyResource("https://x"), InvalidConfiguration("bad")):
        result = handle_error(error)
        assert isinstance(result, HTTPException)
        assert result.status_code == 422
        assert result.detail == str(error)


def test_handle_error_fetch_error():
    result = handle_error(FetchError(503, "https://x/data.tsv", "Service Unavailable"))
    assert result.status_code == 502
    assert result.detail == {
        "message": "Failed to fetch https://x/data.tsv: 503 Service Unavailable",
        "upstream_status": 503,
        "url": "https://x/data.tsv",
    }


def test_handle_error_passes_http_exceptions_through():
    original = HTTPException(status_code=404, detail="Not found")
    assert handle_error(original) is original


def test_handle_error_unexpected():
    result = handle_error(ValueError("boom"))
    assert result.status_code == 500
    assert result.detail == "Unexpected error: boom"


@pytest.mark.asyncio
async def test_handle_load_error_returns_result():
    async def succeed():
        return 42

    assert await handle_load_error(succeed()) == 42


@pytest.mark.asyncio
async def test_handle_load_error_converts_failures():
    async def fail():
        raise MissingColumn("date")

    with pytest.raises(HTTPException) as excinfo:
        await handle_load_error(fail())
    assert excinfo.value.status_code == 422
    assert isinstance(excinfo.value.__cause__, MissingColumn)


def test_exception_messages():
    assert str(FetchError(None, "https://x", "")) == "Failed to fetch https://x: network error"
    assert str(EmptyResource()) == "Tabular resource is empty: <text>"
    assert InvalidConfiguration("bin count must be positive").reason == "bin count must be positive"
