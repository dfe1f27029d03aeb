from __future__ import annotations

import os

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """Typed application settings built from environment variables."""

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: list[str] = ["*"]

    # Application settings
    app_name: str = "BexQR"
    app_version: str = "1.0.0"
    log_level: str = "info"

    # Quiet zone around rendered codes, in modules
    qr_border: int = 4

    @field_validator("qr_border")
    @classmethod
    def validate_qr_border(cls, v: int) -> int:
        if v < 0:
            raise ValueError("QR border cannot be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.lower()
        if level not in {"critical", "error", "warning", "info", "debug", "trace"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    return Settings(
        api_host=os.environ.get("BEXQR_API_HOST", "0.0.0.0"),
        api_port=int(os.environ.get("BEXQR_API_PORT", "8000")),
        api_debug=os.environ.get("BEXQR_API_DEBUG", "false").lower() == "true",
        api_cors_origins=os.environ.get("BEXQR_API_CORS_ORIGINS", "*").split(","),
        app_name=os.environ.get("BEXQR_APP_NAME", "BexQR"),
        app_version=os.environ.get("BEXQR_APP_VERSION", "1.0.0"),
        log_level=os.environ.get("BEXQR_LOG_LEVEL", "info"),
        qr_border=int(os.environ.get("BEXQR_QR_BORDER", "4")),
    )
