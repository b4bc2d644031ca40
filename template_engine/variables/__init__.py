"""
Variable rendering module.
Substitutes context values into interpolation expressions.
"""

from .renderer import render, stringify

__all__ = ['render', 'stringify']
