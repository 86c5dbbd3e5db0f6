"""Configuration management for tx-engine."""

from dataclasses import dataclass, field

from tx_engine.exceptions import ConfigurationError

OUTPUT_FORMATS = ("csv", "jsonl")
LOG_FORMATS = ("standard", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SourceConfig:
    """Transaction source configuration."""

    trim_whitespace: bool = True


@dataclass
class SinkConfig:
    """Client state sink configuration."""

    output_format: str = "csv"
    sort_clients: bool = False


@dataclass
class EngineConfig:
    """Main configuration for tx-engine."""

    source: SourceConfig = field(default_factory=SourceConfig)
    sink: SinkConfig = field(default_factory=SinkConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        import os

        source = SourceConfig(
            trim_whitespace=os.getenv("TX_ENGINE_TRIM_WHITESPACE", "true").lower() == "true",
        )

        sink = SinkConfig(
            output_format=os.getenv("TX_ENGINE_OUTPUT_FORMAT", "csv").lower(),
            sort_clients=os.getenv("TX_ENGINE_SORT_CLIENTS", "false").lower() == "true",
        )

        return cls(
            source=source,
            sink=sink,
            log_level=os.getenv("TX_ENGINE_LOG_LEVEL", "WARNING").upper(),
            log_format=os.getenv("TX_ENGINE_LOG_FORMAT", "standard").lower(),
        )

    def validate(self) -> "EngineConfig":
        """Check enumerated settings.

        Returns
        -------
        EngineConfig
            This config, for chaining.

        Raises
        ------
        ConfigurationError
            If a setting has an unsupported value.
        """
        if self.sink.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unsupported output format {self.sink.output_format!r}, expected one of {OUTPUT_FORMATS}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unsupported log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unsupported log level {self.log_level!r}, expected one of {LOG_LEVELS}"
            )
        return self
