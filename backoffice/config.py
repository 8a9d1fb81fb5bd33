import functools

from pydantic_settings import BaseSettings


class Config(BaseSettings):
    APP_TITLE: str = "Back Office"
    LOG_LEVEL: str = "INFO"


@functools.lru_cache
def get_config() -> Config:
    return Config()
