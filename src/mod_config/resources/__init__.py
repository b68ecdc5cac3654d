"""
Resources for mod-config.

Provides the packaged stylesheets and helpers to apply them.
"""

from .style_manager import StyleManager, apply_style_class, style_manager

__all__ = ["StyleManager", "apply_style_class", "style_manager"]
