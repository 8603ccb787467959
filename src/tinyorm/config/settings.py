"""Package settings and configuration."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

env_path = Path.cwd() / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Settings loaded from ``TINYORM_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="TINYORM_", extra="ignore")

    log_level: str = Field(
        default="WARNING",
        description="Level used by setup_logging() for the tinyorm logger",
    )

    strict_by_default: bool = Field(
        default=False,
        description=(
            "Strictness of model types that neither pass strict= "
            "nor inherit it from a base model"
        ),
    )

    json_indent: int | None = Field(
        default=None,
        ge=0,
        description="Indent for to_string(); None keeps the compact form",
    )


settings = Settings()
