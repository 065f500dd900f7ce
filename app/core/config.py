import json

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str

    SECRET_KEY: str
    ALGORITHM: str = "HS256"

    BACKEND_CORS_ORIGINS: str = '["http://localhost:5173","http://localhost:3000"]'

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Project Stats API"
    DEBUG: bool = False

    # Stats cache (stale-while-revalidate)
    STATS_CACHE_TTL_HOURS: int = 4
    STATS_PROVIDER_TIMEOUT_SECONDS: float = 10.0
    STATS_DISABLED_PROVIDERS: str = ""  # e.g. "github,hangar"

    # External registries
    GITHUB_API_TOKEN: str = ""
    MODRINTH_API_TOKEN: str = ""

    # Revenue chart
    CHART_CURRENCY_SYMBOL: str = "£"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            try:
                parsed: list[str] = json.loads(self.BACKEND_CORS_ORIGINS)
                return parsed
            except json.JSONDecodeError:
                return ["http://localhost:5173", "http://localhost:3000"]
        return self.BACKEND_CORS_ORIGINS

    @property
    def disabled_stats_providers(self) -> set[str]:
        return {
            name.strip().lower()
            for name in self.STATS_DISABLED_PROVIDERS.split(",")
            if name.strip()
        }


settings = Settings()
