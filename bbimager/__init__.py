"""Core logic for a BeagleBoard imaging utility: progress, navigation, persistence and animation."""

__version__ = "0.0.7"