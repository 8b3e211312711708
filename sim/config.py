"""Simulation configuration loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Simulation settings.

    Values are read from ``SIM_``-prefixed environment variables,
    e.g. ``SIM_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(env_prefix="SIM_")

    LOG_LEVEL: str = "INFO"

    # main_app()에 설치되는 리소스 초기값
    GAME_SPEED: float = 1.0
    RNG_SEED: int = 0


settings = Settings()
