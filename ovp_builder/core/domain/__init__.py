# ovp_builder/core/domain/__init__.py
"""
Sentence builder domain: lexicon tables, the choice resolver, the sentence
assembler and the random sentence generator. Pure code, no I/O.
"""

from .assembler import assemble, format_sentence
from .choices import format_choices, resolve_choices
from .exceptions import AssemblyError, DomainError, LexiconInvariantError, TranslationError
from .lexicon import LEXICON, Lexicon, Proximity
from .models import (
    Assembled,
    AssemblyResult,
    ChoiceField,
    ChoiceMap,
    Incomplete,
    Phrase,
    Requirement,
    Selection,
)
from .randomizer import randomize_selection

__all__ = [
    "LEXICON",
    "Assembled",
    "AssemblyError",
    "AssemblyResult",
    "ChoiceField",
    "ChoiceMap",
    "DomainError",
    "Incomplete",
    "Lexicon",
    "LexiconInvariantError",
    "Phrase",
    "Proximity",
    "Requirement",
    "Selection",
    "TranslationError",
    "assemble",
    "format_choices",
    "format_sentence",
    "randomize_selection",
    "resolve_choices",
]
