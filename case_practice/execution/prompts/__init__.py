"""
Prompt templates for advisory requests.
"""

from .loader import render
from .templates import Template

__all__ = ["Template", "render"]
