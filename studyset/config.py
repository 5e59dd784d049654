"""Configuration helpers: config directory, deck file discovery, settings."""

import pathlib

DEFAULT_SETTINGS = {"host": "127.0.0.1", "port": 8787, "open_browser": True}


def get_config_dir() -> pathlib.Path:
    return pathlib.Path.home() / ".config" / "studyset"


def get_data_path(config_dir: pathlib.Path | None = None) -> pathlib.Path:
    if config_dir is None:
        config_dir = get_config_dir()
    config_path = config_dir / "config"
    if config_path.exists():
        for line in config_path.read_text().splitlines():
            line = line.strip()
            if line.startswith("FILE="):
                return pathlib.Path(line[5:].strip()).expanduser()
    return pathlib.Path.cwd() / "data" / "flashcards.txt"


def load_settings(config_dir: pathlib.Path) -> dict:
    settings_path = config_dir / "settings.toml"
    settings = dict(DEFAULT_SETTINGS)
    if settings_path.exists():
        settings.update(_parse_toml_simple(settings_path.read_text()))
    return settings


def _parse_toml_simple(text: str) -> dict:
    """Minimal TOML parser for flat key=value files."""
    result = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip()
            if v.startswith('"') and v.endswith('"'):
                v = v[1:-1]
            elif v.isdigit():
                v = int(v)
            elif v == "true":
                v = True
            elif v == "false":
                v = False
            result[k] = v
    return result
