"""
Custom exception hierarchy for launchgames.

```
LaunchGamesError (base)
├── DeviceError
│   └── DeviceNotFoundError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Game logic never raises these: presses on separators, unknown control pads
and similar inputs are ordinary no-ops. Only startup (finding the device,
loading the config) can fail.
"""

from .base import LaunchGamesError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import DeviceError, DeviceNotFoundError
from .handlers import format_error_for_display, wrap_pydantic_error

__all__ = [
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "DeviceError",
    "DeviceNotFoundError",
    "LaunchGamesError",
    "format_error_for_display",
    "wrap_pydantic_error",
]
