from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    input_dir: str = "/app/files"
    pdf_engine: str = "pdfplumber"

    max_workers: int = 4
    analysis_timeout_seconds: int = 30

    export_format: str = "json"
    output_path: str = ""

    persist_results: bool = False
    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "docmeta"
    db_username: str = "docmeta"
    db_password: str = "secret"
