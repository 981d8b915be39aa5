"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.code_generator import DEFAULT_ALPHABET, DEFAULT_LENGTH, RoomCodeGenerator
from .domain.range_validator import RangeValidator


class ValidationConfig(BaseModel):
    """Business-rule parameters for new rooms."""
    reference_utc_offset_hours: int = 9
    max_dates: int = 60
    horizon_months: int = 6

    @field_validator("reference_utc_offset_hours")
    @classmethod
    def validate_offset(cls, v: int) -> int:
        """Validate offset is a real UTC offset."""
        if not -12 <= v <= 14:
            raise ValueError(f"UTC offset must be between -12 and 14, got {v}")
        return v

    @field_validator("max_dates", "horizon_months")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Value must be greater than zero, got {v}")
        return v


class RoomCodeConfig(BaseModel):
    """Room code alphabet and length."""
    alphabet: str = DEFAULT_ALPHABET
    length: int = DEFAULT_LENGTH

    @field_validator("alphabet")
    @classmethod
    def validate_alphabet(cls, value: str) -> str:
        """Ensure the alphabet is usable and has no repeated characters."""
        if not value:
            raise ValueError("alphabet must not be empty")
        if len(set(value)) != len(value):
            raise ValueError("alphabet must not contain repeated characters")
        return value

    @field_validator("length")
    @classmethod
    def validate_length(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("length must be greater than zero")
        return value


class AppConfig(BaseModel):
    """Application configuration."""
    storage_path: str = "meetroom_rooms.json"
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    room_code: RoomCodeConfig = Field(default_factory=RoomCodeConfig)

    def get_storage_path(self) -> Path:
        return Path(self.storage_path).expanduser()

    def build_validator(self, **kwargs) -> RangeValidator:
        """Create a RangeValidator from the configured rules."""
        return RangeValidator(
            utc_offset_hours=self.validation.reference_utc_offset_hours,
            max_dates=self.validation.max_dates,
            horizon_months=self.validation.horizon_months,
            **kwargs,
        )

    def build_code_generator(self) -> RoomCodeGenerator:
        """Create the room code generator from the configured alphabet."""
        return RoomCodeGenerator(
            alphabet=self.room_code.alphabet,
            length=self.room_code.length,
        )

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Create it with storage_path, validation and room_code settings,\n"
                f"or copy config.example.yaml as a starting point."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of meetroom/)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load the configuration, falling back to defaults.

    An explicitly given path must exist; without one, a missing default
    config file means built-in defaults are used.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if not default_path.exists():
        return AppConfig()
    return AppConfig.load_from_yaml(default_path)
