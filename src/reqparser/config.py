"""Runtime configuration for the reqparser listener."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reqparser.decoder import DEFAULT_MAX_DEPTH
from reqparser.errors import UnsupportedTargetError
from reqparser.printer import PrintMode
from reqparser.schema import RenderTarget

DEFAULT_PORT = 8080


class ReqparserSettings(BaseSettings):
    """Listener settings, built once at startup and shared read-only by every request."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    host: str = Field(default="127.0.0.1", alias="REQPARSER_HOST")
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535, alias="REQPARSER_PORT")
    format: RenderTarget | None = Field(default=None, alias="REQPARSER_FORMAT")
    pretty: bool = Field(default=False, alias="REQPARSER_PRETTY")
    headers: bool = Field(default=False, alias="REQPARSER_HEADERS")
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, gt=0, alias="REQPARSER_MAX_DEPTH")

    @field_validator("format", mode="before")
    @classmethod
    def _parse_format(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        try:
            return RenderTarget.parse(value)  # type: ignore[arg-type]
        except UnsupportedTargetError as exc:
            valid = ", ".join(target.value for target in RenderTarget)
            raise ValueError(f"Invalid format type: {value}. Valid formats are: {valid}") from exc

    @property
    def print_mode(self) -> PrintMode:
        return PrintMode.DELIMITED if self.pretty else PrintMode.COMPACT


def load_settings(**overrides: object) -> ReqparserSettings:
    """Read settings from env/.env; explicit overrides win over the environment."""
    values = {key: value for key, value in overrides.items() if value is not None}
    return ReqparserSettings(**values)  # type: ignore[arg-type]


__all__ = ["DEFAULT_PORT", "ReqparserSettings", "load_settings"]
