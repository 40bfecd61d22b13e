# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argstream."""
import logging

logger: logging.Logger = logging.getLogger("argstream")
