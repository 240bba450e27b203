"""
Configuration management for rijksregisternummer.

Loads and validates configuration from rijksregisternummer.toml files using
Pydantic. Environment variables prefixed with RIJKSREGISTERNUMMER_ override
the defaults.
"""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rijksregisternummer.cleaner import DEFAULT_FORMATTING_CHARACTERS
from rijksregisternummer.models import Category

CONFIG_FILE_NAME = "rijksregisternummer.toml"


class CleanerConfig(BaseSettings):
    """Cleaner configuration."""

    model_config = SettingsConfigDict(env_prefix="RIJKSREGISTERNUMMER_CLEANER_")

    formatting_characters: str = Field(
        default=DEFAULT_FORMATTING_CHARACTERS,
        description="Regular expression matching the characters to remove",
    )

    @field_validator("formatting_characters")
    @classmethod
    def check_regex(cls, value: str) -> str:
        """Ensure the pattern compiles."""
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid regular expression {value!r}: {e}") from e
        return value


class GeneratorConfig(BaseSettings):
    """Random number generator configuration."""

    model_config = SettingsConfigDict(env_prefix="RIJKSREGISTERNUMMER_GENERATOR_")

    locale: str = Field(default="nl_BE", description="Faker locale")
    minimum_age: int = Field(default=0, ge=0, description="Minimum age of generated people")
    maximum_age: int = Field(default=115, ge=0, le=120, description="Maximum age of generated people")
    seed: Optional[int] = Field(default=None, description="Seed for reproducible output")
    category: Category = Field(
        default=Category.RIJKSREGISTERNUMMER, description="Category of generated numbers"
    )

    @model_validator(mode="after")
    def check_age_window(self) -> GeneratorConfig:
        """Ensure minimum_age <= maximum_age."""
        if self.minimum_age > self.maximum_age:
            raise ValueError(
                f"minimum_age ({self.minimum_age}) exceeds maximum_age ({self.maximum_age})"
            )
        return self


class Config(BaseSettings):
    """Main configuration for rijksregisternummer."""

    cleaner: CleanerConfig = Field(default_factory=CleanerConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """
        Load configuration from TOML file.

        Args:
            path: Path to rijksregisternummer.toml file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        return cls(**data)

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """
        Find and load configuration from rijksregisternummer.toml.

        Searches for rijksregisternummer.toml starting from start_dir and
        walking up the directory tree. Falls back to the defaults when no
        file is found.

        Args:
            start_dir: Directory to start search (default: current directory)

        Returns:
            Config instance
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        # Walk up directory tree
        while True:
            config_path = current / CONFIG_FILE_NAME
            if config_path.exists():
                return cls.from_toml(config_path)

            parent = current.parent
            if parent == current:
                break
            current = parent

        return cls()

    def to_toml(self, path: Path | str) -> None:
        """
        Write configuration to TOML file.

        Args:
            path: Path to write rijksregisternummer.toml
        """
        config_path = Path(path)

        toml_content = f"""# rijksregisternummer configuration

[cleaner]
formatting_characters = {json.dumps(self.cleaner.formatting_characters)}

[generator]
locale = {json.dumps(self.generator.locale)}
minimum_age = {self.generator.minimum_age}
maximum_age = {self.generator.maximum_age}
category = {int(self.generator.category)}
"""
        if self.generator.seed is not None:
            toml_content += f"seed = {self.generator.seed}\n"

        config_path.write_text(toml_content)
