import tomllib
from pathlib import Path

import tomlkit
from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chaintokens.logging import logger

CONFIG_DIR = Path.home() / ".config" / "chaintokens"
CONFIG_FILE = CONFIG_DIR / "config.toml"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class RegistrySettings(BaseModel):
    # Entries sharing a contract address are logged either way, and rejected when False
    allow_shared_addresses: bool = True


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHAINTOKENS_",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    registry: RegistrySettings = RegistrySettings()

    @field_validator("log_level", mode="after")
    def validate_log_level(
        cls,  # noqa: N805
        log_level: str,
    ) -> str:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return log_level


def load_config_from_file(config_path: Path) -> Settings:
    return Settings(
        **tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Saved configuration file at {config_path}.")


settings = load_config_from_file(CONFIG_FILE) if CONFIG_FILE.exists() else Settings()
logger.setLevel(settings.log_level)
