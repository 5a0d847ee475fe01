"""Configuration objects for hanabi-canvas."""

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any

import yaml
from mashumaro import DataClassDictMixin, field_options
from mashumaro.config import BaseConfig

from .exceptions import InputException
from .records import STRICT_SCALARS, RequestRecord

__all__ = [
    "ChallengeConfig",
    "read_challenge_config",
]

_LOGGER = logging.getLogger(__name__)

MIN_MAX_ACTIVE_REQUESTS = 1
MAX_MAX_ACTIVE_REQUESTS = 10
MIN_TIME_LIMIT = 5.0
MIN_COLOR_LIMIT = 1


@dataclass
class ChallengeConfig(DataClassDictMixin):
    """Configuration for challenge mode, including the predefined requests.

    Out of range limits are clamped into range rather than rejected.
    """

    predefined_requests: list[RequestRecord] | None = field(
        metadata=field_options(alias="predefinedRequests"), default=None
    )
    """Requests loaded into the record store when it is created."""

    max_active_requests: int = field(
        metadata=field_options(alias="maxActiveRequests"), default=3
    )
    """Maximum number of active requests the player can have at once."""

    default_time_limit: float = field(
        metadata=field_options(alias="defaultTimeLimit"), default=60.0
    )
    """Default time limit in seconds for timed constraints."""

    default_color_limit: int = field(
        metadata=field_options(alias="defaultColorLimit"), default=4
    )
    """Default maximum number of unique colors allowed."""

    def __post_init__(self) -> None:
        self.max_active_requests = min(
            max(self.max_active_requests, MIN_MAX_ACTIVE_REQUESTS),
            MAX_MAX_ACTIVE_REQUESTS,
        )
        self.default_time_limit = max(MIN_TIME_LIMIT, self.default_time_limit)
        self.default_color_limit = max(MIN_COLOR_LIMIT, self.default_color_limit)

    @classmethod
    def parse_doc(cls, doc: dict[str, Any]) -> "ChallengeConfig":
        """Parse a ChallengeConfig from a decoded document."""
        if not isinstance(doc, dict):
            raise InputException(f"Invalid challenge config, expected a mapping: {doc}")
        try:
            return cls.from_dict(doc)
        except (ValueError, TypeError, LookupError) as err:
            raise InputException(f"Invalid challenge config: {err}") from err

    @classmethod
    def parse_yaml(cls, content: str) -> "ChallengeConfig":
        """Parse a serialized challenge config."""
        try:
            doc = yaml.safe_load(content)
        except yaml.YAMLError as err:
            raise InputException(f"Unable to parse challenge config: {err}") from err
        return cls.parse_doc(doc)

    class Config(BaseConfig):
        serialize_by_alias = True
        omit_none = True
        serialization_strategy = STRICT_SCALARS


def read_challenge_config(config_path: Path) -> ChallengeConfig:
    """Return the contents of a challenge config file."""
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as err:
        raise InputException(
            f"Unable to read challenge config {config_path}: {err}"
        ) from err
    if not content.strip():
        raise InputException(f"Challenge config file {config_path} is empty")
    config = ChallengeConfig.parse_yaml(content)
    _LOGGER.debug(
        "Loaded challenge config %s with %d predefined requests",
        config_path,
        len(config.predefined_requests or []),
    )
    return config
