from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import DEFAULT_MANIFEST, DEFAULT_OUTPUT_DIR, HTTP_TIMEOUT_SEC

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env)."""

    model_config = SettingsConfigDict(env_prefix="ASSETPACK_", env_file=None, extra="ignore")

    manifest: str = Field(default=DEFAULT_MANIFEST)
    environment: str = Field(default="development")  # development|production
    remote_host: str | None = Field(default=None)
    remote_base_path: str = Field(default="")
    asset_hosts: str = Field(default="")  # comma-separated
    js_compression: str = Field(default="jsmin")
    css_compression: str = Field(default="cssmin")
    http_timeout: float = Field(default=HTTP_TIMEOUT_SEC)
    output_dir: str = Field(default=DEFAULT_OUTPUT_DIR)

    @property
    def development(self) -> bool:
        return self.environment.lower() != "production"

    @property
    def asset_host_list(self) -> list[str]:
        return [h.strip().rstrip("/") for h in self.asset_hosts.split(",") if h.strip()]


def get_settings() -> Settings:
    return Settings()
