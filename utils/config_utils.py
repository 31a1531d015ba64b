import os
import sys


def get_effective_config_value(name: str, config: dict) -> str | None:
    """
    Returns the effective configuration value for a given name, following priority:
        1. Command-line parameter (--name=value)
        2. Config file value (case-insensitive)
        3. System environment variable (case-insensitive)

    Args:
        name (str): Variable name (case-insensitive, e.g. "BROWSER")
        config (dict): Configuration dictionary loaded from config.json

    Returns:
        str | None: Effective value or None if not found
    """
    name_lower = name.lower()

    # 1 Command-line via raw sys.argv (--name=value)
    for arg in sys.argv:
        if arg.startswith("--") and "=" in arg:
            arg_name, arg_val = arg[2:].split("=", 1)
            if arg_name.lower() == name_lower:
                return arg_val.strip()

    # 2 Config file
    for key, value in config.items():
        if key.lower() == name_lower:
            return str(value)

    # 3 Environment variable
    for key, value in os.environ.items():
        if key.lower() == name_lower:
            return str(value)

    return None


def get_bool_config_value(name: str, config: dict, default: bool = False) -> bool:
    value = get_effective_config_value(name, config)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes")


def get_step_delay_seconds(config: dict) -> float:
    """Convert the 'step_delay' setting (milliseconds) to seconds, 0.0 when unset or invalid."""
    try:
        return float(config.get("step_delay")) / 1000.0
    except (TypeError, ValueError):
        return 0.0


# Settings every run has, whether or not config.json lists them
RUN_SETTINGS = ("browser", "headless", "timeout", "highlight", "step_delay",
                "screenshot_on_error", "demo_base_url")
BOOL_SETTINGS = {"headless": True, "highlight": False, "screenshot_on_error": True}
NUMBER_SETTINGS = ("timeout", "step_delay")


def get_effective_config(config: dict, overrides: dict = None) -> dict:
    """
    Returns the run configuration with every setting resolved by
    get_effective_config_value(). Values in 'overrides' (parsed pytest options)
    replace config file values; None means the option was not given.
    """
    merged = dict(config)
    merged.update({key: value for key, value in (overrides or {}).items() if value is not None})

    effective = {}
    for name in dict.fromkeys([*merged, *RUN_SETTINGS]):
        if name in BOOL_SETTINGS:
            effective[name] = get_bool_config_value(name, merged, default=BOOL_SETTINGS[name])
            continue

        value = get_effective_config_value(name, merged)
        if value is None:
            continue

        if name in NUMBER_SETTINGS:
            try:
                value = float(value)
            except ValueError:
                value = 0.0

        effective[name] = value

    return effective
