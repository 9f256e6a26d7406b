from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    DB_PATH: str = "fitness.sqlite"
    SQL_ECHO: bool = False
    SEED_CATALOG: bool = True

    LOG_LEVEL: str = "INFO"
    ALLOW_ORIGINS: str = "*"          # comma-separated
    API_VERSION: str = "dev"

    HOST: str = "127.0.0.1"
    PORT: int = 4000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_PATH == ":memory:":
            return "sqlite://"
        return f"sqlite:///{self.DB_PATH}"

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOW_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    return Settings()
