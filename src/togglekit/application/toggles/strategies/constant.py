"""Toggle strategies – unconditional on/off switches."""
from __future__ import annotations

from togglekit.application.toggles.binder import ParameterBinder
from togglekit.application.toggles.context import EvaluationContext
from togglekit.application.toggles.descriptor import ToggleDescriptor
from togglekit.application.toggles.strategy import ToggleStrategy


class OnToggle(ToggleStrategy):
    type = "OnToggle"

    @classmethod
    def describe(cls) -> ToggleDescriptor:
        return ToggleDescriptor(type=cls.type, friendly_name="On", description="Toggle that is always active.")

    async def evaluate(self, parameters: ParameterBinder, context: EvaluationContext) -> bool:  # noqa: ARG002
        return True


class OffToggle(ToggleStrategy):
    type = "OffToggle"

    @classmethod
    def describe(cls) -> ToggleDescriptor:
        return ToggleDescriptor(type=cls.type, friendly_name="Off", description="Toggle that is never active.")

    async def evaluate(self, parameters: ParameterBinder, context: EvaluationContext) -> bool:  # noqa: ARG002
        return False


__all__ = ["OffToggle", "OnToggle"]
