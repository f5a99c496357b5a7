from typing import Literal

from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()


class Settings(BaseSettings):
    model_config = {"env_prefix": "DOMAIN_BLOCKLIST_"}

    # Logging (stderr only; stdout carries verdicts)
    log_level: str = _defaults.get("log_level", "warning")
    log_format: Literal["json", "console"] = _defaults.get("log_format", "json")

    # Input decoding
    input_encoding: str = _defaults.get("input_encoding", "utf-8")


settings = Settings()
