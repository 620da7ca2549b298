"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import EngineParams, LoggingParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _unknown_keys(section: str, params: dict[str, Any], known: type) -> list[ValidationError]:
    allowed = {f.name for f in fields(known)}
    return [
        ValidationError(field=f"{section}.{key}", message="Unknown setting", value=value)
        for key, value in params.items()
        if key not in allowed
    ]


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_engine_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate engine parameters."""
        errors = _unknown_keys("engine", params, EngineParams)

        for name in ("initial_state", "catch_key"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=f"engine.{name}",
                        message="Must be a non-empty string",
                        value=value
                    ))

        # The catch key can never be a state, so a record must not start in it
        initial_state = params.get("initial_state", EngineParams.initial_state)
        catch_key = params.get("catch_key", EngineParams.catch_key)
        if initial_state == catch_key:
            errors.append(ValidationError(
                field="engine.initial_state",
                message="Must differ from engine.catch_key",
                value=initial_state
            ))

        if "log_transitions" in params:
            value = params["log_transitions"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="engine.log_transitions",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = _unknown_keys("logging", params, LoggingParams)

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for name in ("format_json", "include_timestamp"):
            if name in params:
                value = params[name]
                if not isinstance(value, bool):
                    errors.append(ValidationError(
                        field=f"logging.{name}",
                        message="Must be a boolean",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in config:
            if section not in ("engine", "logging"):
                errors.append(ValidationError(field=section, message="Unknown section", value=config[section]))

        for section, validate in (
            ("engine", ConfigValidator.validate_engine_params),
            ("logging", ConfigValidator.validate_logging_params),
        ):
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=params))
                continue
            errors.extend(validate(params))

        return errors
