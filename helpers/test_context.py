_current_config = {}


def set_config(config: dict):
    global _current_config
    _current_config = dict(config or {})


def get_config() -> dict:
    """Return the effective run configuration published by conftest."""
    return _current_config
