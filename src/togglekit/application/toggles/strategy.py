"""Application toggles – ToggleStrategy port."""
from __future__ import annotations

import abc

from togglekit.application.toggles.binder import ParameterBinder
from togglekit.application.toggles.context import EvaluationContext
from togglekit.application.toggles.descriptor import ToggleDescriptor


class ToggleStrategy(abc.ABC):
    """One activation rule.

    Subclasses set ``type`` to a stable identifier that feature stores use
    to reference the strategy, and implement :meth:`evaluate`. Evaluation
    must be side-effect free apart from logging and must not swallow
    ``asyncio.CancelledError``.
    """

    type: str = ""

    @classmethod
    @abc.abstractmethod
    def describe(cls) -> ToggleDescriptor: ...

    @abc.abstractmethod
    async def evaluate(self, parameters: ParameterBinder, context: EvaluationContext) -> bool: ...


__all__ = ["ToggleStrategy"]
