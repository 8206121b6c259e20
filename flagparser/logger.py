# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for flagparser."""
import logging

logger: logging.Logger = logging.getLogger("flagparser")
