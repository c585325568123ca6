"""SkyParty Service Configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SkyParty 서비스 설정.

    모든 값은 SKYPARTY_ 접두사 환경변수로 덮어쓸 수 있습니다.
    """

    # Service
    app_name: str = "skyparty-api"
    environment: str = "development"
    log_level: str = "INFO"

    # Database
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "skyparty"
    postgres_password: str = "skyparty"
    postgres_db: str = "skyparty"
    database_echo: bool = False
    database_pool_size: int = 10
    database_max_overflow: int = 20

    # Game
    starting_credits: int = 150
    starter_character_id: str = "kitty"
    seed_catalog_on_startup: bool = True
    max_game_reward: int = 1000
    active_user_window_days: int = 7

    # Account activation (대소문자 무시)
    activation_codes: list[str] = [
        "SKYP-ARTY-2024-GOLD",
        "TEST-CODE-ABCD-1234",
        "DEMO-FULL-ACCE-XYZ",
        "PREM-IUMU-SER2-024",
        "VIPM-EMBE-RCOD-E123",
        "BETA-TEST-ER20-24",
        "EARL-YBIR-DSPE-CIAL",
        "FOUN-DER2-024-CODE",
        "GOLD-ENTI-CKET-CODE",
        "PLAT-INUM-ACCE-SS24",
    ]

    # Internal API (/internal/*). 설정되면 X-Internal-Token 헤더가 일치해야 합니다.
    internal_api_token: str | None = None

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # OpenTelemetry
    otel_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://localhost:4317"
    otel_sampling_rate: float = 1.0

    model_config = SettingsConfigDict(env_prefix="SKYPARTY_", case_sensitive=False)

    @property
    def database_url(self) -> str:
        """PostgreSQL 연결 URL."""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()
