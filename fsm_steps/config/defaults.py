"""Default configuration parameters for the step engine."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EngineParams:
    """Step engine parameters."""
    initial_state: str = "Start"       # State given to records built by make_state
    catch_key: str = "catch"           # Handler table key reserved for the catch handler
    log_transitions: bool = True       # Emit a log event for every state change


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class StepsConfig:
    """Complete engine configuration."""
    engine: EngineParams = field(default_factory=EngineParams)
    logging: LoggingParams = field(default_factory=LoggingParams)


def get_default_config() -> StepsConfig:
    """Get the default configuration instance."""
    return StepsConfig(
        engine=EngineParams(),
        logging=LoggingParams(),
    )
