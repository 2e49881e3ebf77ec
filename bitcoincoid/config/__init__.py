"""Configuration utilities for the Bitcoin.co.id client."""

from .settings import EndpointSettings, Settings, load_settings

__all__ = ["EndpointSettings", "Settings", "load_settings"]
