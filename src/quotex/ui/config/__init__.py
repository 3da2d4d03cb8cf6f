"""Configuration module for the quotex UI."""

from .presets import PROVIDER_STYLES
from .session_state import initialize_session_state

__all__ = ["PROVIDER_STYLES", "initialize_session_state"]
