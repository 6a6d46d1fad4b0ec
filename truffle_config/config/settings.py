"""Build settings using Pydantic models.

Features:
- Semantic version validation for the compiler release
- Strict boolean optimizer flag
- Optional optimizer run count
- Frozen models, loaded once and read thereafter
"""

import re

from typing import Any, Dict, Optional, Tuple, Type

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    StrictBool,
    StrictInt,
    field_validator,
)
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from truffle_config.utils.constants import (
    COMPILER_NAME,
    DEFAULT_OPTIMIZER_ENABLED,
    DEFAULT_SOLC_VERSION,
)


# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)


class OptimizerSettings(BaseModel):
    """Solidity optimizer switch."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: StrictBool = Field(
        DEFAULT_OPTIMIZER_ENABLED, description="Enable the solc optimizer"
    )
    runs: Optional[PositiveInt] = Field(
        None, description="Expected number of contract runs to optimize for"
    )


class SolcSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    optimizer: OptimizerSettings = Field(default_factory=OptimizerSettings)


class SolcCompiler(BaseModel):
    """Solidity compiler release and its settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = Field(DEFAULT_SOLC_VERSION, description="solc release (semver)")
    settings: SolcSettings = Field(default_factory=SolcSettings)

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Require a major.minor.patch semantic version."""
        if not SEMVER_PATTERN.match(v):
            raise ValueError(f"version must be a semantic version, got {v!r}")
        return v

    @property
    def name(self) -> str:
        return COMPILER_NAME

    @property
    def version_info(self) -> Tuple[int, int, int]:
        """Get (major, minor, patch) as integers."""
        match = SEMVER_PATTERN.match(self.version)
        return int(match.group(1)), int(match.group(2)), int(match.group(3))


class CompilersSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    solc: SolcCompiler = Field(default_factory=SolcCompiler)


class NetworkSettings(BaseModel):
    """Development chain endpoint."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = Field(..., description="Chain RPC host")
    port: StrictInt = Field(..., ge=1, le=65535, description="Chain RPC port")
    network_id: str = Field(..., description="Network id, '*' matches any")

    @field_validator("network_id", mode="before")
    @classmethod
    def parse_network_id(cls, v: Any) -> Any:
        """Accept numeric network ids."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class BuildSettings(BaseSettings):
    """Build settings read from the declared document.

    Only init arguments are used as a source; environment variables and
    dotenv files never override the declaration.
    """

    compilers: CompilersSettings = Field(default_factory=CompilersSettings)
    networks: Dict[str, NetworkSettings] = Field(default_factory=dict)

    model_config = SettingsConfigDict(frozen=True, extra="forbid")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    @property
    def solc(self) -> SolcCompiler:
        """Shortcut to the solc compiler settings."""
        return self.compilers.solc

    @property
    def optimizer_enabled(self) -> bool:
        return self.compilers.solc.settings.optimizer.enabled
