"""Testing fakes – in-memory doubles for toggle ports."""
from togglekit.testing.fakes.location import FakeLocationProvider

__all__ = ["FakeLocationProvider"]
