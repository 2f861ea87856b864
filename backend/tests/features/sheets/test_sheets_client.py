"""
Tests for GoogleSheetsClient.

HTTP is served by httpx.MockTransport; credentials are a stub with a
ready token, so no network or key material is involved.
"""

import asyncio

import httpx
import pytest

from xcstats.config import settings
from xcstats.features.sheets import GoogleSheetsClient, SourceUnavailable


class StubCredentials:
    valid = True
    token = "test-token"

    def refresh(self, request):
        raise AssertionError("valid credentials should not refresh")


def make_client(handler, spreadsheet_id="sheet-123"):
    return GoogleSheetsClient(
        spreadsheet_id=spreadsheet_id,
        worksheet="Sheet1",
        race_dates_worksheet="Race Dates",
        credentials=StubCredentials(),
        transport=httpx.MockTransport(handler),
    )


class TestFetch:

    def test_results_range_and_auth(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.raw_path.decode()
            seen["auth"] = request.headers["Authorization"]
            return httpx.Response(200, json={"values": [["Runner"], ["Luis Ramirez"]]})

        rows = asyncio.run(make_client(handler).fetch_raw_rows())

        assert rows == [["Runner"], ["Luis Ramirez"]]
        assert seen["path"].endswith("/sheet-123/values/Sheet1%21A%3AK")
        assert seen["auth"] == "Bearer test-token"

    def test_race_dates_range(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.raw_path.decode()
            return httpx.Response(200, json={"values": []})

        asyncio.run(make_client(handler).fetch_raw_race_dates())

        assert seen["path"].endswith("/values/Race%20Dates%21A%3AD")

    def test_empty_sheet(self):
        def handler(request):
            return httpx.Response(200, json={"range": "Sheet1!A1:K1"})

        assert asyncio.run(make_client(handler).fetch_raw_rows()) == []


class TestErrors:

    def test_api_error(self):
        def handler(request):
            return httpx.Response(403, json={"error": {"message": "denied"}})

        with pytest.raises(SourceUnavailable):
            asyncio.run(make_client(handler).fetch_raw_rows())

    def test_non_json_body(self):
        def handler(request):
            return httpx.Response(200, text="<html>Service Unavailable</html>")

        with pytest.raises(SourceUnavailable):
            asyncio.run(make_client(handler).fetch_raw_rows())

    def test_non_object_body(self):
        def handler(request):
            return httpx.Response(200, json=["not", "an", "object"])

        with pytest.raises(SourceUnavailable):
            asyncio.run(make_client(handler).fetch_raw_rows())

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(SourceUnavailable):
            asyncio.run(make_client(handler).fetch_raw_rows())

    def test_missing_spreadsheet_id(self, monkeypatch):
        monkeypatch.setattr(settings, "google_sheets_spreadsheet_id", None)
        client = make_client(lambda r: httpx.Response(200), spreadsheet_id=None)

        with pytest.raises(SourceUnavailable):
            asyncio.run(client.fetch_raw_rows())

    def test_missing_credentials(self, monkeypatch):
        monkeypatch.setattr(settings, "google_service_account_email", None)
        monkeypatch.setattr(settings, "google_service_account_key", None)
        client = GoogleSheetsClient(spreadsheet_id="sheet-123")

        with pytest.raises(SourceUnavailable):
            asyncio.run(client.fetch_raw_rows())
