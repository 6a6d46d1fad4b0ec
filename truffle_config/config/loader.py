"""Simple build settings loading."""

import json

from pathlib import Path
from typing import Any, Dict, Optional, Union

import structlog

from pydantic import ValidationError

from truffle_config.exceptions import InvalidConfigError, MissingConfigError
from truffle_config.utils.constants import (
    TEST_NETWORK_HOST,
    TEST_NETWORK_ID,
    TEST_NETWORK_PORT,
)

from .settings import BuildSettings, NetworkSettings


logger = structlog.get_logger()


def _build(raw: Any, source: str) -> BuildSettings:
    if not isinstance(raw, dict):
        raise InvalidConfigError(
            f"Settings document in {source} must be an object, "
            f"got {type(raw).__name__}"
        )

    # BaseSettings reads "_"-prefixed init kwargs as source options
    private = sorted(key for key in raw if key.startswith("_"))
    if private:
        logger.error("Unknown settings keys", source=source, keys=private)
        raise InvalidConfigError(f"Unknown settings keys in {source}: {private}")

    try:
        return BuildSettings(**raw)
    except ValidationError as e:
        logger.error("Invalid build settings", source=source, error=str(e))
        raise InvalidConfigError(f"Invalid build settings in {source}: {e}") from e


def parse(text: str, source: str = "<string>") -> BuildSettings:
    """Parse a JSON settings document.

    Raises:
        InvalidConfigError: If the document is malformed or invalid
    """
    try:
        raw: Dict[str, Any] = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Malformed settings document", source=source, error=str(e))
        raise InvalidConfigError(f"Malformed settings document {source}: {e}") from e

    return _build(raw, source)


def load(path: Optional[Union[str, Path]] = None) -> BuildSettings:
    """Load build settings.

    Args:
        path: Optional JSON settings document. When omitted the declared
            settings are returned.

    Returns:
        Frozen BuildSettings instance

    Raises:
        MissingConfigError: If ``path`` does not exist
        InvalidConfigError: If the document is malformed or invalid
    """
    if path is None:
        settings = BuildSettings()
        logger.debug("Using declared build settings", version=settings.solc.version)
        return settings

    cfg_path = Path(path)
    logger.info("Loading build settings", path=str(cfg_path))

    if not cfg_path.is_file():
        raise MissingConfigError(f"Settings file not found: {cfg_path}")

    with cfg_path.open("r", encoding="utf-8") as fh:
        settings = parse(fh.read(), source=str(cfg_path))

    logger.info(
        "Build settings loaded",
        version=settings.solc.version,
        optimizer=settings.optimizer_enabled,
        networks=sorted(settings.networks),
    )
    return settings


def disabled_test_network() -> NetworkSettings:
    """Get the disabled ``networks.test`` block as it would parse if enabled."""
    return NetworkSettings(
        host=TEST_NETWORK_HOST, port=TEST_NETWORK_PORT, network_id=TEST_NETWORK_ID
    )
