"""
Core utilities and configuration for the hotel voice assistant.

This package provides core functionality including logging configuration,
monitoring, database setup, and the shared I/O models.
"""

from hotel_voice_assistant.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
