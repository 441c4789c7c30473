"""
Configuration settings for the Kube Inventory API.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class InventorySettings(BaseSettings):
    """Process configuration loaded from environment variables."""

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 8000

    # Cluster access
    kubeconfig: Optional[str] = None
    kubernetes_service_host: Optional[str] = None  # set inside a pod
    home: Optional[str] = None

    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> InventorySettings:
    return InventorySettings()
