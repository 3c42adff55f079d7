import tomllib
from pathlib import Path

import pydantic
import tomlkit
from pydantic import BaseModel, NonNegativeInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from swapmath.exceptions import SwapMathValueError
from swapmath.logging import logger

CONFIG_DIR = Path.home() / ".config" / "swapmath"
CONFIG_FILE = CONFIG_DIR / "config.toml"


class LibrarySettings(BaseModel):
    # Maximum entries held by each memoized library function, 0 disables caching
    cache_size: NonNegativeInt = 512


class Settings(BaseSettings):
    """
    Package settings. Values in the config file take precedence, environment variables with the
    `SWAPMATH_` prefix fill in the rest, e.g. `SWAPMATH_LIBRARY__CACHE_SIZE=1024`.
    """

    model_config = SettingsConfigDict(
        env_prefix="SWAPMATH_",
        env_nested_delimiter="__",
    )

    library: LibrarySettings = LibrarySettings()


def load_config_from_file(config_path: Path) -> Settings:
    try:
        return Settings(
            **tomllib.loads(
                config_path.read_text(),
            )
        )
    except (tomllib.TOMLDecodeError, pydantic.ValidationError) as exc:
        msg = f"Invalid configuration file {config_path}: {exc}"
        raise SwapMathValueError(message=msg) from exc


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Saved configuration to {config_path}.")


if CONFIG_FILE.exists():
    settings = load_config_from_file(CONFIG_FILE)
    logger.debug(f"Loaded configuration from {CONFIG_FILE}.")
else:
    settings = Settings()
