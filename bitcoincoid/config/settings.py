from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bitcoincoid.core import constants


class EndpointSettings(BaseSettings):
    """Endpoint configuration; enough for public market data calls."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    public_api_url: str = Field(constants.PUBLIC_API_URL, alias="BCI_PUBLIC_API_URL")
    trade_api_url: str = Field(constants.TRADE_API_URL, alias="BCI_TRADE_API_URL")
    timeout: float | None = Field(None, alias="BCI_TIMEOUT")
    raise_on_error: bool = Field(False, alias="BCI_RAISE_ON_ERROR")


class Settings(EndpointSettings):
    """Client configuration loaded from environment variables."""

    api_key: str = Field(..., alias="BCI_AK", repr=False)
    secret_key: str = Field(..., alias="BCI_SK", repr=False)


def load_settings(env_path: str | Path | None = None, require_credentials: bool = True) -> EndpointSettings:
    """Load settings from environment variables or a .env file.

    Args:
        env_path: Optional path to .env file. If None, uses default .env file.
        require_credentials: When False, ``BCI_AK`` / ``BCI_SK`` may be missing
            and only the endpoint configuration is returned.

    Returns:
        Settings instance loaded from environment variables.
    """
    if env_path:
        load_dotenv(dotenv_path=env_path)
    else:
        load_dotenv()
    if require_credentials:
        return Settings()
    return EndpointSettings()
