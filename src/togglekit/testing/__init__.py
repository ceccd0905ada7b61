"""Testing – fakes and generators for code that evaluates toggles."""
from togglekit.testing.fakes import FakeLocationProvider

__all__ = ["FakeLocationProvider"]
