"""Application configuration loaded from an optional JSON file."""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from .errors import ConfigurationError, InvalidConfigError
from .logging import get_logger
from .paths import CONFIG_PATH, SESSION_DIR

logger = get_logger(__name__)

DEFAULT_PROVIDER_URL = "https://www.1secmail.com/api/v1/"
DEFAULT_SHORTENER_URL = "https://is.gd/create.php?format=simple"


class AppConfig(BaseModel):
    """Pydantic model for tmpmail configuration.

    One instance is built per invocation and handed to every component
    that needs it.
    """

    browser: str = "w3m"
    clipboard_cmd: str = "xclip -selection c"
    provider_base_url: str = DEFAULT_PROVIDER_URL
    shortener_url: str = DEFAULT_SHORTENER_URL
    raw_text: bool = False
    session_dir: Path = Field(default_factory=lambda: SESSION_DIR)
    network_timeout: float = Field(default=15.0, gt=0)  # in seconds
    log_level: str = "WARNING"

    def with_overrides(self, **overrides: Any) -> "AppConfig":
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        unknown = set(values) - set(type(self).model_fields)
        if unknown:
            raise InvalidConfigError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}",
                details={"keys": sorted(unknown)},
            )
        return self.model_validate({**self.model_dump(), **values})


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration from file, or defaults if the file is absent."""

    from pydantic import ValidationError

    config_path = Path(path) if path else CONFIG_PATH

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults.")
        return AppConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        config = AppConfig(**data)
        logger.debug(f"Configuration loaded from {config_path}")
        return config

    except json.JSONDecodeError as e:
        raise InvalidConfigError(f"Configuration file is not valid JSON: {str(e)}") from e
    except ValidationError as e:
        raise InvalidConfigError(
            f"Configuration data does not match expected schema: {str(e)}"
        ) from e
    except TypeError as e:
        raise InvalidConfigError("Configuration file must contain a JSON object") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read configuration: {str(e)}") from e
