"""Configuration management using pydantic-settings"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    templates_dir: str = Field(
        default=str(BUNDLED_TEMPLATES_DIR),
        description="Directory of Markdown templates with front matter",
    )
    log_level: str = Field(default="INFO", description="Logging level")

    # Rendering policy
    unresolved_marker: str = Field(
        default="[{name}]",
        description="Text left in place of an optional field with no value; {name} is the field name",
    )
    list_separator: str = Field(default=", ", description="Separator for list-of-string values")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Get application settings"""
    return Settings()
