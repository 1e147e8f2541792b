"""Configuration management for SkillSwap."""

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml

from skillswap.matching.weights import ScoringConfig
from skillswap.profile.models import User

logger = logging.getLogger(__name__)

# Default paths
DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_USERS_PATH = DATA_DIR / "users.yaml"
DEFAULT_SCORING_CONFIG_PATH = DATA_DIR / "scoring.yaml"

# Environment variable pointing at a scoring override file
SCORING_CONFIG_ENV = "SKILLSWAP_SCORING_CONFIG"


def ensure_data_dir() -> None:
    """Ensure the data directory exists."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def _read_yaml(path: Path):
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_users(path: Optional[Path] = None) -> List[User]:
    """Load users from a YAML file.

    The file holds either a list of users or a mapping with a ``users`` key.

    Args:
        path: Optional path to the users file. Defaults to data/users.yaml.

    Returns:
        List of User instances. Empty if the file is empty.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If a user record is malformed.
    """
    if path is None:
        path = DEFAULT_USERS_PATH

    data = _read_yaml(Path(path))
    if data is None:
        return []

    if isinstance(data, dict):
        data = data.get("users") or []

    users = [User.model_validate(item) for item in data]
    logger.info(f"Loaded {len(users)} users from {path}")
    return users


def resolve_scoring_config_path(path: Optional[Path] = None) -> Optional[Path]:
    """Pick the scoring config file: explicit path, env variable, then default."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(SCORING_CONFIG_ENV)
    if env_path:
        return Path(env_path)

    if DEFAULT_SCORING_CONFIG_PATH.exists():
        return DEFAULT_SCORING_CONFIG_PATH
    return None


def load_scoring_config(path: Optional[Path] = None) -> ScoringConfig:
    """Load scoring weights and thresholds from YAML.

    Values missing from the file keep their defaults.

    Args:
        path: Optional path to the config file. Falls back to the
            SKILLSWAP_SCORING_CONFIG environment variable, then data/scoring.yaml.

    Returns:
        ScoringConfig instance. Returns defaults if no file is configured.

    Raises:
        FileNotFoundError: If an explicitly configured file does not exist.
        pydantic.ValidationError: If the values are out of range or the
            weights do not sum to 1.0.
    """
    resolved = resolve_scoring_config_path(path)
    if resolved is None:
        return ScoringConfig()

    data = _read_yaml(resolved)
    if data is None:
        return ScoringConfig()

    logger.info(f"Loaded scoring config from {resolved}")
    return ScoringConfig.model_validate(data)


def save_scoring_config(config: ScoringConfig, path: Optional[Path] = None) -> Path:
    """Save scoring config to a YAML file.

    Args:
        config: ScoringConfig instance to save.
        path: Optional path to save to. Defaults to data/scoring.yaml.

    Returns:
        Path where the config was saved.
    """
    if path is None:
        path = DEFAULT_SCORING_CONFIG_PATH
        ensure_data_dir()

    data = config.model_dump(mode="json")

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    return Path(path)
