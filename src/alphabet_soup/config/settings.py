"""Configuration management using Pydantic Settings v2."""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from alphabet_soup.config.constants import DEFAULT_ENCODING, DEFAULT_PUZZLE_PATH

# Load .env into os.environ before any settings class is built; the nested
# classes have no env_file of their own and only read os.environ.
load_dotenv()


class PuzzleSettings(BaseSettings):
    """Puzzle input location."""

    path: str = DEFAULT_PUZZLE_PATH
    encoding: str = DEFAULT_ENCODING

    model_config = SettingsConfigDict(env_prefix="PUZZLE_")


class SearchSettings(BaseSettings):
    """Search behaviour."""

    # Stop the whole run on the first word too long for the grid.
    abort_on_impossible: bool = False

    model_config = SettingsConfigDict(env_prefix="SEARCH_")


class Settings(BaseSettings):
    """Root settings class combining all sections.

    Nested sections use ``default_factory`` so each ``Settings()`` reads
    the environment as it is at construction time.
    """

    puzzle: PuzzleSettings = Field(default_factory=PuzzleSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore prefixed env vars handled by nested classes
    )


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the global Settings instance (singleton pattern)."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reload_settings() -> Settings:
    """Reload settings from environment (mainly for testing)."""
    global _settings_instance
    _settings_instance = Settings()
    return _settings_instance
