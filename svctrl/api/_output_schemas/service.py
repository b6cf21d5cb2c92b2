"""Output schemas for service commands.

All fields must always be present for consistency.
"""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ServiceBatchOutput(BaseOutputSchema):
    """Shared shape of the per-service lifecycle commands."""

    svdir: str = Field(..., description="Service definition directory, empty string if config failed to load")
    lndir: str = Field(..., description="Active service directory, empty string if config failed to load")
    services: list[dict[str, Any]] = Field(
        ..., description="One entry per processed name: {name, success, kind, message}"
    )


class ServiceEnableOutput(ServiceBatchOutput):
    """Output schema for service enable command."""


class ServiceDisableOutput(ServiceBatchOutput):
    """Output schema for service disable command."""


class ServiceStopOutput(ServiceBatchOutput):
    """Output schema for service stop command."""


class ServiceSignalOutput(ServiceBatchOutput):
    """Output schema for service signal command."""

    command: str = Field(..., description="Control character written to supervise/control")


class ServiceStatusOutput(ServiceBatchOutput):
    """Output schema for service status command.

    Successful entries additionally carry running, pid, elapsed_seconds, line and log.
    """


class ServiceShowOutput(BaseOutputSchema):
    """Output schema for service show command."""

    svdir: str = Field(..., description="Service definition directory, empty string if config failed to load")
    lndir: str = Field(..., description="Active service directory, empty string if config failed to load")
    available: list[str] = Field(..., description="Service definitions found in svdir")
    active: list[str] = Field(..., description="Active services found in lndir")


schema_registry.register_output_schema("service", "enable", ServiceEnableOutput)
schema_registry.register_output_schema("service", "disable", ServiceDisableOutput)
schema_registry.register_output_schema("service", "stop", ServiceStopOutput)
schema_registry.register_output_schema("service", "signal", ServiceSignalOutput)
schema_registry.register_output_schema("service", "status", ServiceStatusOutput)
schema_registry.register_output_schema("service", "show", ServiceShowOutput)
