"""
Editor configuration for Selective Blur.

Settings are kept in a small JSON file next to the application. A missing
file means defaults; a damaged file is logged and replaced by defaults in
memory.

Classes:
    EditorConfig: Editor settings with validation

Functions:
    get_config_path: Location of the config file inside a base directory
    load_editor_config: Read settings from disk
    save_editor_config: Write settings to disk
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging

from SB_Libs.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_BLUR_STRENGTH,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_LOG_LEVEL,
)
from SB_Libs.RegionEditLib.region_models import validate_blur_strength

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EditorConfig:
    """Configuration for the blur editor.

    Attributes:
        default_blur_strength: Blur strength selected after start-up (1-20)
        jpeg_quality: JPEG export quality 1-100 (default: 95)
        history_limit: Maximum undo snapshots kept (None = unlimited)
        log_level: Logging level name for the launcher
    """
    default_blur_strength: int = DEFAULT_BLUR_STRENGTH
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    history_limit: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        """Validate configuration values."""
        validate_blur_strength(self.default_blur_strength)

        if not (1 <= self.jpeg_quality <= 100):
            raise ValueError(f"jpeg_quality must be 1-100, got {self.jpeg_quality}")

        if self.history_limit is not None and self.history_limit < 1:
            raise ValueError(f"history_limit must be >= 1 or None, got {self.history_limit}")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {self.log_level}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items()
                    if k in cls.__dataclass_fields__}
        return cls(**filtered)


def get_config_path(base_dir: Path) -> Path:
    return Path(base_dir) / CONFIG_FILE_NAME


def load_editor_config(config_path: Path) -> EditorConfig:
    """
    Load editor settings.

    Args:
        config_path: JSON file to read

    Returns:
        The stored settings, or defaults if the file is missing or invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        logger.info("Config file not found at %s. Using defaults.", config_path)
        return EditorConfig()

    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError("Config file does not contain a JSON object")
        return EditorConfig.from_dict(payload)
    except (json.JSONDecodeError, ValueError, TypeError, OSError) as e:
        logger.warning("Config file %s is invalid: %s. Using defaults.", config_path, e)
        return EditorConfig()


def save_editor_config(config: EditorConfig, config_path: Path) -> None:
    """
    Write editor settings as JSON.

    Raises:
        OSError: If the file cannot be written
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    logger.debug("Configuration saved to %s", config_path)
