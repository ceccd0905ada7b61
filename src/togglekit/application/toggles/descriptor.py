"""Application toggles – descriptive metadata for configuration tooling."""
from __future__ import annotations

import dataclasses
from typing import Any

SEMICOLON_LIST_PARAMETER_TYPE = "semicolon-list"
STRING_PARAMETER_TYPE = "string"


@dataclasses.dataclass(frozen=True)
class ParameterDescriptor:
    name: str
    type: str = STRING_PARAMETER_TYPE
    description: str = ""


@dataclasses.dataclass(frozen=True)
class ToggleDescriptor:
    """What a configuration UI needs to render a toggle. Carries no behaviour."""

    type: str
    friendly_name: str
    description: str = ""
    parameters: tuple[ParameterDescriptor, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


__all__ = [
    "ParameterDescriptor",
    "SEMICOLON_LIST_PARAMETER_TYPE",
    "STRING_PARAMETER_TYPE",
    "ToggleDescriptor",
]
