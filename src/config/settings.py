"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use ATOMCSS_ prefix (e.g., ATOMCSS_STYLE_RESOLUTION=physical).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Compiler configuration via environment variables.

    Environment variables use ATOMCSS_ prefix.

    Examples:
        ATOMCSS_CLASS_NAME_PREFIX=x
        ATOMCSS_STYLE_RESOLUTION=physical
        ATOMCSS_STRICT_VALUES=true
    """

    model_config = SettingsConfigDict(
        env_prefix="ATOMCSS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Identifier configuration
    class_name_prefix: str = Field(
        default="x",
        description="Leading letters of every generated identifier (keeps identifiers from starting with a digit)",
    )

    # Resolution configuration
    style_resolution: Literal["logical", "physical"] = Field(
        default="logical",
        description="'logical' emits CSS logical properties; 'physical' emits left/right with an RTL variant",
    )

    value_flipping: bool = Field(
        default=True,
        description="Mirror direction-dependent values (gradients, shadows, cursors) in the RTL variant",
    )

    # Validation configuration
    strict_values: bool = Field(
        default=False,
        description="Raise UnsupportedValueError when a value does not fit its property's domain",
    )

    strict_properties: bool = Field(
        default=False,
        description="Raise UnknownPropertyError for properties absent from the resolver tables",
    )

    debug_mode: bool = Field(
        default=False,
        description="Trace every resolved declaration (forces CLI verbosity to 3)",
    )

    @field_validator("class_name_prefix")
    @classmethod
    def prefix_validate(cls, value: str) -> str:
        """Ensure the prefix keeps identifiers valid CSS class names"""
        if not value or not value[0].isalpha() or not value.replace("-", "").replace("_", "").isalnum():
            raise ValueError(f"class_name_prefix must start with a letter: {value!r}")
        return value

    def physical_is(self) -> bool:
        """True when logical properties resolve to physical left/right names"""
        return self.style_resolution == "physical"


# Singleton instance - import this in your code
appsettings = AppSettings()
