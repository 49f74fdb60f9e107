"""
Request Config - Config Loader

Reads the JSON config file describing the metering API connection and the
query window, and turns it into an immutable RequestDescriptor.
Every key is mandatory; nothing is defaulted.
"""

import json
import logging
from datetime import datetime, timezone
from functools import cached_property

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from consumption_pipe.exceptions import ConfigFileError, ConfigValueError

logger = logging.getLogger(__name__)

CONSUMPTION_URL_TEMPLATE = (
    "{base_url}/{mpan}/meters/{serial}/consumption/"
    "?page_size={page_size}&period_from={period_from}&period_to={period_to}"
)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, treating naive values as UTC"""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class RequestDescriptor(BaseModel):
    """Immutable description of one consumption request"""

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)

    base_url: str = Field(..., description="API root, e.g. .../v1/electricity-meter-points")
    api_key: str = Field(..., repr=False, description="Opaque API secret")
    meter_point_id: str = Field(..., alias="mpan", description="Meter point (MPAN)")
    meter_serial: str = Field(..., alias="serial", description="Meter serial number")
    page_size: int = Field(..., gt=0, description="Records requested per page")
    period_from: str = Field(..., description="ISO 8601 start of the window")
    period_to: str = Field(..., description="ISO 8601 end of the window")

    @field_validator("period_from", "period_to")
    @classmethod
    def validate_timestamp(cls, v):
        """Validate ISO 8601 timestamp format"""
        try:
            parse_timestamp(v)
        except ValueError:
            raise ValueError(f"Timestamp must be in ISO 8601 format, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_period(self):
        if parse_timestamp(self.period_from) >= parse_timestamp(self.period_to):
            raise ValueError(
                f"period_from ({self.period_from}) must be before period_to ({self.period_to})"
            )
        return self

    @cached_property
    def request_url(self) -> str:
        """Consumption endpoint URL, computed on first access"""
        return CONSUMPTION_URL_TEMPLATE.format(
            base_url=self.base_url,
            mpan=self.meter_point_id,
            serial=self.meter_serial,
            page_size=self.page_size,
            period_from=self.period_from,
            period_to=self.period_to,
        )


def _describe_validation_error(error: ValidationError) -> str:
    # Input values are left out so a mistyped api_key never reaches the logs
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
        for err in error.errors()
    )


def load_request_config(path: str) -> RequestDescriptor:
    """
    Load the request descriptor from a JSON config file

    Args:
        path: Path to the config file

    Returns:
        RequestDescriptor: Validated, immutable descriptor

    Raises:
        ConfigFileError: File missing, unreadable, not JSON or not an object
        ConfigValueError: Required key missing, wrong-typed or invalid
    """
    logger.info(f"Loading API config from {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError as e:
        raise ConfigFileError(f"Config file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigFileError(f"Config file is not valid JSON: {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"Config file could not be read: {path}: {e}") from e

    if not isinstance(document, dict):
        raise ConfigFileError(
            f"Config file must hold a JSON object, got {type(document).__name__}: {path}"
        )

    try:
        descriptor = RequestDescriptor.model_validate(document)
    except ValidationError as e:
        raise ConfigValueError(
            f"Invalid config in {path}: {_describe_validation_error(e)}"
        ) from e

    logger.info(
        f"Config loaded: mpan={descriptor.meter_point_id}, serial={descriptor.meter_serial}, "
        f"window={descriptor.period_from} -> {descriptor.period_to}, page_size={descriptor.page_size}"
    )
    return descriptor
