from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "resume_analyzer"
    db_username: str = "resume_analyzer"
    db_password: str = "secret"

    record_store: str = "postgres"

    storage_disk: str = "local"
    storage_root: str = "/app/files"

    pdf_engine: str = "pymupdf"
    preview_scale: float = 4.0

    scoring_provider: str = "openai"
    scoring_api_key: str = ""
    scoring_model_name: str = ""
    scoring_base_url: str = ""
    scoring_timeout_seconds: int = 60
    scoring_temperature: float = 0.0

    completion_delay_seconds: float = 1.0
    completion_webhook_url: str = ""
