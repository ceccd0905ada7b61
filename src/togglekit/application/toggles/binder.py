"""Application toggles – ParameterBinder."""
from __future__ import annotations

from togglekit.application.features.feature import ParameterData, freeze_parameters

DEFAULT_SPLIT_SEPARATOR = ";"


class ParameterBinder:
    """Typed read access to a toggle's raw :data:`ParameterData`.

    Strategies never parse configuration themselves; absent parameters come
    back as ``None`` or an empty list and the strategy decides what that means.
    """

    def __init__(
        self,
        data: ParameterData | None,
        separator: str = DEFAULT_SPLIT_SEPARATOR,
    ) -> None:
        self._data = freeze_parameters(data)
        self._separator = separator

    @property
    def separator(self) -> str:
        return self._separator

    def get_value(self, name: str) -> str | None:
        value = self._data.get(name)
        if value is None:
            return None
        return str(value)

    def get_list_value(self, name: str, separator: str | None = None) -> list[str]:
        """Split parameter *name* on *separator*, dropping blank segments.

        Order is preserved; each segment is stripped of surrounding whitespace.
        """
        raw = self.get_value(name)
        if not raw:
            return []
        sep = separator or self._separator
        return [segment.strip() for segment in raw.split(sep) if segment.strip()]


__all__ = ["DEFAULT_SPLIT_SEPARATOR", "ParameterBinder"]
