"""Global configuration settings."""

import copy
from typing import Dict, Any


_DEFAULTS: Dict[str, Any] = {
    # Buffer allocation
    "allocation": {
        "dtype": "float64",
        "zero_fill": True,  # False leaves new buffers uninitialised
    },
    # Text rendering
    "formatting": {
        "width": 12,
        "precision": 4,
    },
    # Plotting settings
    "plotting": {
        "theme": "plotly_dark",
        "width": 800,
        "height": 600,
        "colorscale": "Viridis",
    },
}


class Config:
    """
    Global configuration for ndmatrix.

    Keys are addressed with dots, e.g. ``Config.get("formatting.width")``.
    """

    _config: Dict[str, Any] = copy.deepcopy(_DEFAULTS)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        keys = key.split(".")
        value = cls._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k, default)
            else:
                return default
        return value

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        """Set configuration value."""
        keys = key.split(".")
        config = cls._config
        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]
        config[keys[-1]] = value

    @classmethod
    def reset(cls) -> None:
        """Reset to default configuration."""
        cls._config = copy.deepcopy(_DEFAULTS)
