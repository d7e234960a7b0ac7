"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_channel_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate channel parameters."""
        errors = []

        # Validate std_dev_multiplier
        if "std_dev_multiplier" in params:
            value = params["std_dev_multiplier"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="std_dev_multiplier",
                    message="Must be a non-negative number",
                    value=value
                ))

        # Validate buy_threshold
        if "buy_threshold" in params:
            value = params["buy_threshold"]
            if not _is_number(value) or value >= 0:
                errors.append(ValidationError(
                    field="buy_threshold",
                    message="Must be a negative number",
                    value=value
                ))

        # Validate sell_threshold
        if "sell_threshold" in params:
            value = params["sell_threshold"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="sell_threshold",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate min_points
        if "min_points" in params:
            value = params["min_points"]
            if not _is_int(value) or value < 2:
                errors.append(ValidationError(
                    field="min_points",
                    message="Must be an integer of at least 2",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_report_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate report parameters."""
        errors = []

        for field_name in ("default_days", "min_days", "max_days", "min_data_points"):
            if field_name in params:
                value = params[field_name]
                if not _is_int(value) or value <= 0:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a positive integer",
                        value=value
                    ))

        min_days = params.get("min_days")
        max_days = params.get("max_days")
        if _is_int(min_days) and _is_int(max_days) and min_days > max_days:
            errors.append(ValidationError(
                field="min_days",
                message="Must not exceed max_days",
                value=min_days
            ))

        default_days = params.get("default_days")
        if (_is_int(default_days) and _is_int(min_days) and _is_int(max_days)
                and not min_days <= default_days <= max_days):
            errors.append(ValidationError(
                field="default_days",
                message="Must lie between min_days and max_days",
                value=default_days
            ))

        min_data_points = params.get("min_data_points")
        if _is_int(min_data_points) and min_data_points < 2:
            errors.append(ValidationError(
                field="min_data_points",
                message="Must be at least 2",
                value=min_data_points
            ))

        if "period_options" in params:
            value = params["period_options"]
            if (not isinstance(value, (list, tuple))
                    or not all(_is_int(v) and v > 0 for v in value)):
                errors.append(ValidationError(
                    field="period_options",
                    message="Must be a list of positive integers",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "channel" in config:
            errors.extend(ConfigValidator.validate_channel_params(config["channel"]))

        if "report" in config:
            errors.extend(ConfigValidator.validate_report_params(config["report"]))

        return errors
