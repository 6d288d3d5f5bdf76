"""
Package logger.

The library only emits records; configuring handlers is left to the host application.
"""
import logging

logger = logging.getLogger("commandline")


__all__ = ("logger",)
