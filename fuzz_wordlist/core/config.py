"""
Configuration management for fuzz-wordlist using Pydantic settings.
"""

from typing import List, Optional
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WordlistFilterConfig(BaseModel):
    """Read-only filter and transform settings applied while a wordlist is read."""

    model_config = ConfigDict(frozen=True)

    dirsearch_compat: bool = Field(
        default=False,
        description="Replace the %EXT% marker with each extension"
    )
    extensions: List[str] = Field(default_factory=list, description="Ordered extension list")
    ignore_wordlist_comments: bool = Field(default=False, description="Strip wordlist comments")

    exclude_comment_lines: bool = Field(default=False, description="Drop lines starting with #, ~ or /")
    exclude_dot_lines: bool = Field(default=False, description="Drop lines starting with .")
    exclude_number_lines: bool = Field(default=False, description="Drop lines starting with a digit")
    exclude_uppercase: bool = Field(default=False, description="Drop all-uppercase lines")
    exclude_lowercase: bool = Field(default=False, description="Drop all-lowercase lines")
    exclude_start_upper: bool = Field(default=False, description="Drop lines starting uppercase")
    exclude_start_lower: bool = Field(default=False, description="Drop lines starting lowercase")

    max_line_length: int = Field(
        default=64 * 1024,
        gt=0,
        description="Lines this many bytes or longer abort the read"
    )

    def has_extensions(self) -> bool:
        """Check if any extensions are configured."""
        return len(self.extensions) > 0


class Config(BaseSettings):
    """Main configuration class for fuzz-wordlist."""

    # Application settings
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    wordlist: WordlistFilterConfig = Field(default_factory=WordlistFilterConfig)

    model_config = SettingsConfigDict(
        env_prefix="FUZZ_WORDLIST_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    def is_debug_mode(self) -> bool:
        """Check if debug mode is enabled."""
        return self.debug


def load_config(**overrides) -> Config:
    """
    Build a fresh configuration from the environment.

    Args:
        **overrides: Field values taking precedence over the environment.

    Returns:
        New Config instance. Nothing is cached at module level; callers pass
        the result (or its ``wordlist`` section) to the components they build.
    """
    return Config(**overrides)
