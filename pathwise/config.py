from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Local portfolio cache
    cache_db_path: str = "data/pathwise_cache.db"

    # Visualization
    visualization_horizon_years: int = 30
    visualization_cadence: str = "yearly"  # "yearly" or "monthly"

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
