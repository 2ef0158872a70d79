"""Application configuration loaded from environment variables.

Settings for the database connection, CORS, link construction, and
pagination policy. Uses pydantic-settings for validation and .env file
support.
"""

from urllib.parse import urlparse

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Known insecure default password that must not be used in production
# Security: Runtime check in check_settings() prevents use in production
_INSECURE_DEFAULT_PASSWORD = "customer_api_dev_password"  # nosec B105

_DEFAULT_PAGE_SIZE = 10


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_host: str = "localhost"
    database_port: int = 5432
    database_name: str = "customer_api"
    database_user: str = "customer_api_user"
    database_password: str = _INSECURE_DEFAULT_PASSWORD

    # CORS
    # Production: Set ALLOWED_ORIGINS to specific domain(s)
    allowed_origins: list[str] = ["http://localhost:3000"]

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    # Page links
    # Empty means links are built from the incoming request's base URL.
    base_uri: str = ""

    # Pagination policy
    # max_page_size=None keeps page size unbounded.
    default_page_size: int = _DEFAULT_PAGE_SIZE
    max_page_size: int | None = None

    # Missing customer ids return 200 with null data unless strict mode is on.
    strict_not_found: bool = False

    @property
    def database_url(self) -> str:
        """Async database URL for SQLAlchemy."""
        return (
            f"postgresql+asyncpg://{self.database_user}:{self.database_password}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )

    @model_validator(mode="after")
    def check_settings(self) -> "Settings":
        """Validate pagination policy, link base, and production security.

        Checks:
        - DEFAULT_PAGE_SIZE must be positive
        - MAX_PAGE_SIZE, when set, must not be below DEFAULT_PAGE_SIZE
        - BASE_URI, when set, must be an absolute http(s) URL
        - CORS must not use wildcard origin (incompatible with credentials)
        - Database password must not be the default in production
        """
        if self.default_page_size < 1:
            msg = (
                "DEFAULT_PAGE_SIZE must be at least 1. "
                f"Got: {self.default_page_size}"
            )
            raise ValueError(msg)

        if self.max_page_size is not None and self.max_page_size < self.default_page_size:
            msg = (
                "MAX_PAGE_SIZE must be greater than or equal to DEFAULT_PAGE_SIZE. "
                f"Got: {self.max_page_size} < {self.default_page_size}"
            )
            raise ValueError(msg)

        if self.base_uri:
            parsed = urlparse(self.base_uri)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                msg = (
                    "BASE_URI must be an absolute http(s) URL "
                    f"(e.g. https://api.example.com). Got: {self.base_uri!r}"
                )
                raise ValueError(msg)

        if "*" in self.allowed_origins:
            msg = (
                "ALLOWED_ORIGINS must not contain '*' (wildcard). "
                "CORS credentials are incompatible with wildcard origins."
            )
            raise ValueError(msg)

        if (
            self.environment == "production"
            and self.database_password == _INSECURE_DEFAULT_PASSWORD
        ):
            msg = (
                "Cannot use default database password in production. "
                "Set DATABASE_PASSWORD environment variable to a secure value."
            )
            raise ValueError(msg)

        return self


settings = Settings()
