"""Configuration system for ecg-hr-sim."""

from .loaders import ConfigLoader
from .models import Settings, SignalArgs

__all__ = [
    "ConfigLoader",
    "Settings",
    "SignalArgs",
]
