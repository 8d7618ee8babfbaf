"""Global configuration management for gemmit.

Handles user-level configuration stored in ~/.gemmit/:
- config.yaml: Model, generation and commit error settings
- credentials: API keys for Gemini
"""

import os
import stat
from pathlib import Path
from typing import Dict, Optional, Any

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".gemmit"


def get_global_config_dir() -> Path:
    """Get the global gemmit configuration directory.

    Returns:
        Path to ~/.gemmit/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.gemmit/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file."""
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    """Get path to credentials file."""
    return get_global_config_dir() / "credentials"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.gemmit/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but is not a valid YAML mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.gemmit/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _read_credentials_file(credentials_file: Path) -> Dict[str, str]:
    credentials = {}
    with open(credentials_file, "r") as f:
        for line in f:
            line = line.strip()
            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            # Parse KEY=value format
            if "=" in line:
                key, value = line.split("=", 1)
                credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> Dict[str, str]:
    """Load API keys from ~/.gemmit/credentials.

    Returns:
        Dictionary mapping environment variable names to API keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    try:
        return _read_credentials_file(credentials_file)
    except OSError as e:
        raise GlobalConfigError(f"Failed to load credentials from {credentials_file}: {e}")


def save_credential(key_name: str, api_key: str) -> None:
    """Save or update an API key in the credentials file.

    Args:
        key_name: Environment variable name (e.g., "GEMINI_API_KEY")
        api_key: The API key value.
    """
    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    existing_creds = load_credentials()
    existing_creds[key_name] = api_key

    try:
        with open(credentials_file, "w") as f:
            f.write("# gemmit API credentials\n")
            f.write("# Format: GEMINI_API_KEY=your_key_here\n\n")

            for key, value in existing_creds.items():
                f.write(f"{key}={value}\n")

        # Owner read/write only
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)

    except OSError as e:
        raise GlobalConfigError(f"Failed to save credential: {e}")


def get_credential(key_name: str) -> Optional[str]:
    """Get an API key from the credentials file.

    Args:
        key_name: Environment variable name (e.g., "GEMINI_API_KEY")

    Returns:
        The API key if found, None otherwise.
    """
    return load_credentials().get(key_name)


def get_active_model() -> Optional[str]:
    """Get the active model from global config.

    Returns:
        Model name string, or None if not configured.
    """
    return load_global_config().get("model")


def set_active_model(model: str) -> None:
    """Set the active Gemini model in global config."""
    config = load_global_config()
    config["model"] = model
    save_global_config(config)


def get_max_tokens() -> Optional[int]:
    """Get max_tokens setting from global config."""
    return load_global_config().get("max_tokens")


def get_temperature() -> Optional[float]:
    """Get temperature setting from global config."""
    return load_global_config().get("temperature")


def get_commit_error_phrases() -> Dict[str, list]:
    """Get user-supplied commit error phrases from global config.

    The ``commit_errors`` section may contain ``nothing_to_commit`` and
    ``signing_failed`` lists, which extend the built-in phrase tables.

    Returns:
        Dictionary with phrase lists, empty if not configured.
    """
    section = load_global_config().get("commit_errors") or {}
    if not isinstance(section, dict):
        raise GlobalConfigError("'commit_errors' must be a mapping of phrase lists")
    for key in ("nothing_to_commit", "signing_failed"):
        phrases = section.get(key)
        if phrases is not None and not isinstance(phrases, list):
            raise GlobalConfigError(f"'commit_errors.{key}' must be a list of phrases")
    return section


def initialize_default_config() -> None:
    """Initialize config.yaml with default values if it doesn't exist."""
    from gemmit.config import (
        DEFAULT_MAX_TOKENS,
        DEFAULT_MODEL,
        DEFAULT_TEMPERATURE,
    )

    if get_config_file_path().exists():
        return

    save_global_config({
        "model": DEFAULT_MODEL,
        "max_tokens": DEFAULT_MAX_TOKENS,
        "temperature": DEFAULT_TEMPERATURE,
        "commit_errors": {
            "nothing_to_commit": [],
            "signing_failed": [],
        },
    })


def is_configured() -> bool:
    """Check if gemmit has been configured.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
