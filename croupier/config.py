"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "Enter your bet in the format NAME BET AMOUNT\nor type END to finish: "


class TableConfig(BaseModel):
    """Round timing and wheel parameters."""

    round_interval_seconds: float = Field(default=30.0, gt=0)
    seed: int | None = None  # Fixed seed makes the wheel reproducible


class RosterConfig(BaseModel):
    """Where the player roster comes from."""

    path: Path = Path("players.txt")  # Relative paths resolve against data_dir
    delimiter: str = Field(default=",", min_length=1)


class ConsoleConfig(BaseModel):
    """Interactive input settings."""

    prompt: str = DEFAULT_PROMPT
    sentinel: str = Field(default="end", min_length=1)


class Settings(BaseSettings):
    """Main configuration class."""

    # Paths
    data_dir: Path = Path("data")

    # Observability
    logfire_token: str = ""
    environment: str = "local"

    # Nested configuration sections
    table: TableConfig = Field(default_factory=TableConfig)
    roster: RosterConfig = Field(default_factory=RosterConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("data_dir", mode="after")
    @classmethod
    def resolve_data_dir(cls, v: Path) -> Path:
        """Resolve data directory to absolute path."""
        return v.resolve()

    @property
    def roster_path(self) -> Path:
        """Roster file path, anchored at data_dir when relative."""
        path = self.roster.path.expanduser()
        if path.is_absolute():
            return path
        return self.data_dir / path

    def load_yaml_config(self) -> None:
        """Load and merge YAML configuration."""
        config_path = self.data_dir / "config.yaml"

        if not config_path.exists():
            logger.warning(
                f"Config file not found: {config_path}. "
                "Using defaults. Run 'python -m croupier init' to create it."
            )
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)

            if not yaml_config:
                logger.warning(f"Empty config file: {config_path}")
                return

            for section_name in ["table", "roster", "console"]:
                if section_name in yaml_config:
                    section = getattr(self, section_name)
                    yaml_section = yaml_config[section_name] or {}

                    section_dict = section.model_dump()
                    section_dict.update(yaml_section)

                    new_section = section.__class__(**section_dict)
                    setattr(self, section_name, new_section)

            logger.info(f"Loaded configuration from {config_path}")

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to load config: {e}")
            raise


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    settings.load_yaml_config()
    return settings
