from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "development"  # "production" enables strict startup checks
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000"
    enable_hsts: bool = False  # Set True in production behind HTTPS

    # slowapi: per-client-IP limit applied to every route except /health
    rate_limit_enabled: bool = True
    rate_limit_default: str = "200/minute"

    # Path to a JSON array of mails; empty means the built-in fixture is served
    mails_source_path: str = ""

    @property
    def cors_origin_list(self) -> list[str]:
        """Parsed CORS origins; empty setting allows any origin."""
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        return origins or ["*"]

    def validate_source_config(self) -> None:
        """Raise if production points the mail source at a file that does not exist."""
        if self.app_env != "production" or not self.mails_source_path:
            return
        if not Path(self.mails_source_path).is_file():
            raise RuntimeError(f"MAILS_SOURCE_PATH does not exist: {self.mails_source_path}")


settings = Settings()
