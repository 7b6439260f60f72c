from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "PharmaBrands"
    debug: bool = False

    database_url: str = "sqlite:///./pharmabrands.db"

    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str = "redis://localhost:6379/1"

    brand_connections_path: str = "data/brandConnections.json"
    pharmacy_items_path: str = "data/pharmacyItems.json"
    output_dir: str = "output"

    persist_mappings: bool = False
    run_tasks_inline: bool = False

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False


settings = Settings()
