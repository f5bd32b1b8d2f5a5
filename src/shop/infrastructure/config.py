"""Application settings, read from ``SHOP_*`` environment variables or ``.env``."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = _DEFAULT_DATA_DIR
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"


def get_settings() -> Settings:
    return Settings()
