"""Server configuration.

ServerConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups. The redirect handlers themselves take no
configuration; this only covers how they are served.
"""

from dataclasses import dataclass

from urlshort.errors import ConfigurationError

FORMATS = frozenset({"yaml", "json"})
LOG_LEVELS = frozenset({"critical", "error", "warning", "info", "debug"})


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Serving configuration. Immutable after creation.

    Override what you need::

        config = ServerConfig(port=3000, log_level="debug")
    """

    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "info"

    # Paths document format; None means detect from the file suffix
    format: str | None = None

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any field is out of range."""
        if not 0 <= self.port <= 65535:
            msg = f"port must be between 0 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r}. Expected one of: {', '.join(sorted(LOG_LEVELS))}"
            raise ConfigurationError(msg)
        if self.format is not None and self.format not in FORMATS:
            msg = f"Unknown document format {self.format!r}. Expected one of: {', '.join(sorted(FORMATS))}"
            raise ConfigurationError(msg)
