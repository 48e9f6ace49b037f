# Configuration Module
from .settings import DEFAULT_SAMPLE_SIZE, Settings, get_settings

__all__ = ["DEFAULT_SAMPLE_SIZE", "Settings", "get_settings"]
