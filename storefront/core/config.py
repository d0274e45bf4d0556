"""Storefront Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront Checkout"
    debug: bool = True
    host: str = "0.0.0.0"
    port: int = 8000

    # Order API
    order_api_base_url: str = "http://localhost:8080/WebViva"
    request_timeout: Optional[float] = 30.0

    # Checkout
    default_payment_method: str = "STRIPE"
    prefill_overwrite_edited_fields: bool = False

    class Config:
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
