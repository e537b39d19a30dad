# ovp_builder/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

Each use case wires the pure sentence-builder domain to one external flow:
interactive building, random sentences, and the two translation directions.
"""

from .build_sentence import BuildSentence, RandomSentence
from .translate import TranslateBuilder, TranslateEnglish

__all__ = [
    "BuildSentence",
    "RandomSentence",
    "TranslateBuilder",
    "TranslateEnglish",
]
