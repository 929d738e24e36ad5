from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    postgres_user: str = "root"
    postgres_password: str = "password"
    postgres_db: str = "wallet"
    postgres_host: str = "localhost"
    postgres_port: int = 5432

    # Full SQLAlchemy URL, takes precedence over the postgres_* parts
    database_dsn: Optional[str] = None

    app_name: str = "Wallet API"
    host: str = "0.0.0.0"
    port: int = 1323
    debug: bool = False
    log_level: str = "INFO"
    create_tables: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


    @property
    def database_url(self) -> str:
        if self.database_dsn:
            return self.database_dsn
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
