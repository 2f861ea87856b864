"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

# Package root: backend/xcstats/
PACKAGE_ROOT = Path(__file__).parent
# Bundled content: backend/xcstats/content/
CONTENT_DIR = PACKAGE_ROOT / "content"


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Google Sheets ===
    google_sheets_spreadsheet_id: Optional[str] = Field(
        default=None,
        description="Spreadsheet with race results; demo data is served when unset"
    )
    google_sheets_worksheet: str = Field(
        default="Sheet1",
        description="Worksheet holding race results (columns A:K)"
    )
    google_sheets_race_dates_worksheet: str = Field(
        default="Race Dates",
        description="Worksheet holding the meet schedule (columns A:D)"
    )
    google_service_account_email: Optional[str] = Field(default=None)
    google_service_account_key: Optional[str] = Field(
        default=None,
        description="PEM private key, literal \\n sequences allowed"
    )
    sheets_api_url: str = Field(
        default="https://sheets.googleapis.com/v4/spreadsheets",
        description="Sheets values API endpoint"
    )
    sheets_timeout_seconds: float = Field(default=10.0, gt=0)

    # === Cache ===
    cache_ttl_seconds: float = Field(
        default=30.0,
        ge=0,
        description="Lifetime of cached queries"
    )

    # === Revalidation ===
    revalidate_secret: Optional[str] = Field(
        default=None,
        description="Shared secret for POST /api/v1/revalidate"
    )

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    @field_validator('google_service_account_key')
    @classmethod
    def unescape_private_key(cls, v: Optional[str]) -> Optional[str]:
        """Env files usually carry the PEM key with escaped newlines."""
        if v and "\\n" in v:
            return v.replace("\\n", "\n")
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    @property
    def use_demo_data(self) -> bool:
        return not self.google_sheets_spreadsheet_id

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
