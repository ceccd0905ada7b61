"""
togglekit – pluggable feature toggle evaluation.

Import path convention::

    from togglekit.application.features import Feature, InMemoryFeatureStore, Toggle
    from togglekit.application.toggles import ToggleEngine, default_registry
    from togglekit.adapters.http import HttpLocationProvider
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
