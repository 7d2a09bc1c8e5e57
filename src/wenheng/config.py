from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WENHENG_", env_file=".env", env_file_encoding="utf-8"
    )

    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # PDF 无文字层时按此倍率渲染页面预览 (1.5x ≈ 108 DPI)
    render_zoom: float = 1.5
    render_format: Literal["png", "jpeg"] = "png"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Upload settings
    max_upload_size_mb: int = 20

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


settings = Settings()
