"""Centralized configuration: all env vars in one place."""

import os

_TRUTHY = {"1", "true", "yes", "on"}


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.https_redirect: bool = os.getenv("HTTPS_REDIRECT", "false").lower() in _TRUTHY

        # Client
        self.api_base_url: str = os.getenv("API_BASE_URL", "http://localhost:8000")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of configuration problems, empty when settings are usable."""
        problems = []
        if not self.cors_origins:
            problems.append("CORS_ORIGINS is empty; browser clients will be rejected")
        if not self.api_base_url.startswith(("http://", "https://")):
            problems.append(f"API_BASE_URL must be an http(s) URL, got {self.api_base_url!r}")
        return problems


settings = Settings()
