"""Config settings – ToggleSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from togglekit.config.settings.base import Settings
from togglekit.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ToggleSettings(Settings):
    """Runtime knobs for toggle evaluation, read from ``TOGGLES_*`` variables."""

    _prefix: ClassVar[str] = "TOGGLES"

    list_separator: str = ";"
    location_base_url: str = ""
    location_timeout_seconds: float = 5.0
    feature_cache_ttl_seconds: float = 0.0
    trust_forwarded_for: bool = False

    def _validate(self) -> None:
        if len(self.list_separator) != 1 or self.list_separator.isspace():
            raise InvalidSettingValueError(
                "list_separator", self.list_separator, "must be a single non-blank character"
            )
        if self.location_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "location_timeout_seconds", self.location_timeout_seconds, "must be positive"
            )
        if self.feature_cache_ttl_seconds < 0:
            raise InvalidSettingValueError(
                "feature_cache_ttl_seconds", self.feature_cache_ttl_seconds, "must not be negative"
            )

    @property
    def caching_enabled(self) -> bool:
        return self.feature_cache_ttl_seconds > 0


__all__ = ["ToggleSettings"]
