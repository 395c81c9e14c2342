from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "docverify"
    db_username: str = "docverify"
    db_password: str = "secret"

    files_root: str = "/app/uploads"
    max_image_size_bytes: int = 5 * 1024 * 1024

    ocr_engine: str = "tesseract"
    ocr_language: str = "por"
    ocr_pool_size: int = 2

    face_detector: str = "render"
    face_min_size_px: int = 40

    confidence_threshold: float = 0.3
    min_text_length: int = 20
    face_match_threshold: float = 0.6

    pipeline_timeout_seconds: float = 120.0
