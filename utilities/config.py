"""
Configuration management using environment variables.
Handles store and logging settings with proper validation and defaults.
"""

from typing import Optional
from pathlib import Path

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class BookshelfConfig(BaseSettings):
    """
    Configuration class for the bookshelf store.
    Uses pydantic BaseSettings for environment variable management.
    """

    # Store Configuration
    book_id_length: int = Field(default=16, description="Length of generated book ids")

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    log_file: Optional[str] = Field(default=None)

    # Development/Testing
    debug: bool = Field(default=False)

    @validator('book_id_length')
    def validate_book_id_length(cls, v):
        """Ensure generated ids stay in a collision-safe range."""
        if v < 8 or v > 64:
            raise ValueError('book_id_length must be between 8 and 64')
        return v

    @validator('log_level')
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'log_level must be one of: {valid_levels}')
        return v.upper()

    @validator('log_format')
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        valid_formats = ['json', 'console']
        if v.lower() not in valid_formats:
            raise ValueError(f'log_format must be one of: {valid_formats}')
        return v.lower()

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields from .env

    def get_log_file_path(self) -> Optional[Path]:
        """Get log file path as Path object."""
        if self.log_file:
            return Path(self.log_file)
        return None


# Global configuration instance
config = BookshelfConfig()
