"""Error type for malformed configuration."""


class ConfigError(ValueError):
    """Raised when a configuration file or value has the wrong shape."""
