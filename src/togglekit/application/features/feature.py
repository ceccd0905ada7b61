"""Application features – Feature, Toggle and ParameterData value objects."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Iterable, Mapping

from togglekit.kernel.errors import DuplicateToggleError, ToggleNotFoundError

ParameterData = Mapping[str, str]


def freeze_parameters(data: Mapping[str, str] | None) -> ParameterData:
    """Return a read-only copy of *data* so evaluations never observe later writes."""
    return MappingProxyType(dict(data or {}))


@dataclasses.dataclass(frozen=True)
class Toggle:
    """A configured strategy instance attached to a feature."""

    type: str
    data: ParameterData = dataclasses.field(default_factory=lambda: freeze_parameters(None))

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", freeze_parameters(self.data))

    def get_data(self) -> ParameterData:
        return self.data


@dataclasses.dataclass(frozen=True)
class Feature:
    """A named capability gated by zero or more toggles.

    ``product`` scopes the feature to a tenant/product; ``None`` is the
    default scope. At most one toggle per strategy type is allowed.
    """

    name: str
    product: str | None = None
    toggles: tuple[Toggle, ...] = ()
    enabled: bool = True

    def __post_init__(self) -> None:
        toggles = tuple(self.toggles)
        seen: set[str] = set()
        for toggle in toggles:
            if toggle.type in seen:
                raise DuplicateToggleError(self.name, toggle.type)
            seen.add(toggle.type)
        object.__setattr__(self, "toggles", toggles)

    @classmethod
    def with_toggles(
        cls,
        name: str,
        toggles: Iterable[Toggle],
        *,
        product: str | None = None,
        enabled: bool = True,
    ) -> "Feature":
        return cls(name=name, product=product, toggles=tuple(toggles), enabled=enabled)

    @property
    def key(self) -> tuple[str, str | None]:
        return (self.name, self.product)

    def find_toggle(self, toggle_type: str) -> Toggle | None:
        for toggle in self.toggles:
            if toggle.type == toggle_type:
                return toggle
        return None

    def get_toggle(self, toggle_type: str) -> Toggle:
        toggle = self.find_toggle(toggle_type)
        if toggle is None:
            raise ToggleNotFoundError(self.name, toggle_type)
        return toggle


__all__ = ["Feature", "ParameterData", "Toggle", "freeze_parameters"]
