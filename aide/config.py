"""User configuration and data path resolution."""

import os
from pathlib import Path

import yaml

DEFAULT_VERBOSITY = 1


def get_config_dir() -> Path:
    """Directory holding config.yaml ($XDG_CONFIG_HOME/aide or ~/.config/aide)."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "aide"


def get_config_file() -> Path:
    return get_config_dir() / "config.yaml"


def load_config() -> dict:
    """Load config from config.yaml. Missing or broken files give {}."""
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    try:
        return yaml.safe_load(config_file.read_text()) or {}
    except yaml.YAMLError:
        return {}


def save_config(config: dict) -> None:
    """Save config to config.yaml."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    get_config_file().write_text(yaml.dump(config, default_flow_style=False))


def get_data_dir() -> Path:
    """Get the data directory with resolution priority.

    Priority:
    1. AIDE_HOME environment variable
    2. Config file (data_dir)
    3. ~/.aide (fallback)
    """
    # 1. Environment variable
    env_home = os.environ.get("AIDE_HOME")
    if env_home:
        return Path(env_home)

    # 2. Config file
    config = load_config()
    if config.get("data_dir"):
        return Path(config["data_dir"]).expanduser()

    # 3. Home directory
    return Path.home() / ".aide"


def set_data_dir(path: Path) -> None:
    """Save data directory to config file."""
    config = load_config()
    config["data_dir"] = str(path.resolve())
    save_config(config)


def get_verbosity() -> int:
    """Get verbosity level from config (default: 1).

    Levels:
    - 0: Silent (only errors and essential output)
    - 1: Normal (standard output)
    - 2: Verbose (detailed information)
    - 3: Debug (index and scoring internals)
    """
    config = load_config()
    return config.get("verbosity", DEFAULT_VERBOSITY)


def set_verbosity(level: int) -> None:
    """Save verbosity level to config file (0-3)."""
    if not 0 <= level <= 3:
        raise ValueError("Verbosity level must be between 0 and 3")
    config = load_config()
    config["verbosity"] = level
    save_config(config)
