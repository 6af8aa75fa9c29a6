import logging
import os
import re
import yaml
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]+))?\}")
ALLOWED_KEYS = {"vfs", "cache"}


def interpolate_env_vars(content: str) -> str:
    """Replace ${VAR} or ${VAR:default} with environment variables."""
    def replace_match(match: re.Match) -> str:
        var_name = match.group(1)
        default_value = match.group(2) if match.group(2) is not None else ""
        return os.environ.get(var_name, default_value)

    return ENV_VAR_PATTERN.sub(replace_match, content)


def load_config(path: Path) -> Dict[str, Any]:
    """
    Load vfsname.yaml with environment variable interpolation.

    Only the 'vfs' and 'cache' sections are kept. A missing or unreadable
    file yields an empty configuration.
    """
    if not path.exists():
        return {}

    try:
        content = path.read_text()
        interpolated_content = interpolate_env_vars(content)
        full_config = yaml.safe_load(interpolated_content) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}

    if not isinstance(full_config, dict):
        logger.warning("Ignoring config %s: top level must be a mapping", path)
        return {}

    return {k: v for k, v in full_config.items() if k in ALLOWED_KEYS}
