"""Helpers for human-friendly presentation of extracted modules."""

from .beautify import BeautifyResult, beautify, beautify_module

__all__ = ["BeautifyResult", "beautify", "beautify_module"]
