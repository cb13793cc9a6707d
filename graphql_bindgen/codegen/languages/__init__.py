"""
Language-specific code generators.

This module contains generators for different target languages.
"""

from .typescript import (
    TypescriptGenerator,
    create_typescript_generator,
    create_subscription_generator,
)

__all__ = [
    "TypescriptGenerator",
    "create_typescript_generator",
    "create_subscription_generator",
]
