"""Application settings and configuration.

This module defines all configuration options for the Inkpress application.
Settings are loaded from environment variables with sensible defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Inkpress", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    site_url: str = Field(default="http://localhost:8000", alias="SITE_URL")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    # Document database
    database_url: str = Field(default="mongodb://localhost:27017", alias="DATABASE_URL")
    database_name: str = Field(default="student-devs-blog", alias="DATABASE_NAME")
    ensure_indexes: bool = Field(default=True, alias="ENSURE_INDEXES")

    # Admin gate: bcrypt hash of the shared publishing password
    admin_password_hash: str = Field(default="", alias="ADMIN_PASSWORD_HASH")

    # Outbound mail relay
    smtp_host: str = Field(default="smtp.gmail.com", alias="SMTP_HOST")
    smtp_port: int = Field(default=587, alias="SMTP_PORT")
    smtp_username: str | None = Field(default=None, alias="SMTP_USERNAME")
    smtp_password: str | None = Field(default=None, alias="SMTP_PASSWORD")
    smtp_use_tls: bool = Field(default=True, alias="SMTP_USE_TLS")
    smtp_timeout_seconds: float = Field(default=10.0, alias="SMTP_TIMEOUT_SECONDS")
    mail_from_address: str = Field(default="blog@localhost", alias="MAIL_FROM_ADDRESS")
    mail_from_name: str = Field(default="Inkpress", alias="MAIL_FROM_NAME")

    # Email deliverability API (mailboxlayer compatible)
    email_validator_url: str = Field(
        default="https://apilayer.net/api/check",
        alias="EMAIL_VALIDATOR_URL",
    )
    email_validator_access_key: str | None = Field(
        default=None,
        alias="EMAIL_VALIDATOR_ACCESS_KEY",
    )
    email_validator_min_score: float = Field(default=0.5, alias="EMAIL_VALIDATOR_MIN_SCORE")
    email_validator_timeout_seconds: float = Field(
        default=10.0,
        alias="EMAIL_VALIDATOR_TIMEOUT_SECONDS",
    )

    # Files and rendering
    assets_dir: Path = Field(default=Path("assets"), alias="ASSETS_DIR")
    image_dir: Path = Field(default=Path("assets/images/blog"), alias="IMAGE_DIR")
    templates_dir: Path = Field(default=_PACKAGE_DIR / "templates", alias="TEMPLATES_DIR")
    page_size: int = Field(default=8, alias="PAGE_SIZE")
    excerpt_length: int = Field(default=219, alias="EXCERPT_LENGTH")

    # When true a failed new-post notification aborts the publish
    strict_notifications: bool = Field(default=False, alias="STRICT_NOTIFICATIONS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def mail_sender(self) -> str:
        """Return the formatted From header value."""
        return f"{self.mail_from_name} <{self.mail_from_address}>"


settings = Settings()
