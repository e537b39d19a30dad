# ovp_builder/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols the external translation services must implement. The core
domain only sees these interfaces, never a model client.
"""

from .translation import ISimilarityScorer, ITranslationModel

__all__ = [
    "ISimilarityScorer",
    "ITranslationModel",
]
