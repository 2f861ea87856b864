"""
Google Sheets values client.

Reads worksheet ranges through the Sheets v4 REST API using a
service account. Read-only scope.
"""

import asyncio
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from xcstats.config import settings
from .base import Grid, RowSource

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


# =============================================================================
# Exceptions
# =============================================================================

class SourceUnavailable(Exception):
    """Raw rows could not be fetched (network, auth or configuration)."""
    pass


# =============================================================================
# Client
# =============================================================================

class GoogleSheetsClient(RowSource):
    """
    Async reader for the results and race dates worksheets.

    Credentials are built lazily from the service account email and
    private key; the token refresh runs in a worker thread because
    google-auth's transport is blocking.
    """

    def __init__(
        self,
        spreadsheet_id: Optional[str] = None,
        worksheet: Optional[str] = None,
        race_dates_worksheet: Optional[str] = None,
        credentials: Any = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.spreadsheet_id = spreadsheet_id or settings.google_sheets_spreadsheet_id
        self.worksheet = worksheet or settings.google_sheets_worksheet
        self.race_dates_worksheet = (
            race_dates_worksheet or settings.google_sheets_race_dates_worksheet
        )
        self.api_url = settings.sheets_api_url.rstrip("/")
        self.timeout = timeout or settings.sheets_timeout_seconds
        self._credentials = credentials
        self._transport = transport

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    def _build_credentials(self) -> service_account.Credentials:
        email = settings.google_service_account_email
        key = settings.google_service_account_key
        if not email or not key:
            raise SourceUnavailable("Missing Google Service Account credentials")

        info = {
            "type": "service_account",
            "client_email": email,
            "private_key": key,
            "token_uri": TOKEN_URI,
        }
        try:
            return service_account.Credentials.from_service_account_info(
                info, scopes=SCOPES
            )
        except ValueError as e:
            raise SourceUnavailable(f"Invalid service account key: {e}") from e

    async def _get_access_token(self) -> str:
        if self._credentials is None:
            self._credentials = self._build_credentials()

        if not self._credentials.valid:
            logger.debug("Refreshing Google access token")
            try:
                await asyncio.to_thread(self._credentials.refresh, Request())
            except GoogleAuthError as e:
                raise SourceUnavailable(f"Google auth failed: {e}") from e

        return self._credentials.token

    # -------------------------------------------------------------------------
    # API Calls
    # -------------------------------------------------------------------------

    async def get_values(self, cell_range: str) -> Grid:
        """
        Read a range in A1 notation.

        Raises:
            SourceUnavailable: on missing config, auth, transport or API errors
        """
        if not self.spreadsheet_id:
            raise SourceUnavailable("GOOGLE_SHEETS_SPREADSHEET_ID is not set")

        token = await self._get_access_token()
        url = f"{self.api_url}/{self.spreadsheet_id}/values/{quote(cell_range, safe='')}"

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(
                    url, headers={"Authorization": f"Bearer {token}"}
                )
        except httpx.TimeoutException as e:
            raise SourceUnavailable(f"Sheets timeout reading {cell_range}") from e
        except httpx.HTTPError as e:
            raise SourceUnavailable(f"Sheets request failed: {e}") from e

        if response.status_code != 200:
            raise SourceUnavailable(
                f"Sheets API error: {response.status_code} - {response.text}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise SourceUnavailable(f"Sheets returned invalid JSON for {cell_range}") from e
        if not isinstance(payload, dict):
            raise SourceUnavailable(f"Unexpected Sheets payload for {cell_range}")

        values = payload.get("values", [])
        logger.debug(f"Fetched {len(values)} rows from {cell_range}")
        return values

    async def fetch_raw_rows(self) -> Grid:
        return await self.get_values(f"{self.worksheet}!A:K")

    async def fetch_raw_race_dates(self) -> Grid:
        return await self.get_values(f"{self.race_dates_worksheet}!A:D")
