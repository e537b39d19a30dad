# ovp_builder/core/domain/morphology.py
"""
Surface-form builders for the three Paiute phrases.

These helpers only concatenate morphemes; they assume the caller has
already checked that the combination is grammatical (see assembler.py).
Morpheme boundaries are written with hyphens.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .lexicon import LENIS_MAP, OBJECT_SUFFIXES

GLOTTAL_STOP = "'"

# Object suffixes take an n- onset after a vowel-final, non-glottal noun.
_NASAL_ONSET = "n"


def to_lenis(word: str, lenis_map: Mapping[str, str] = LENIS_MAP) -> str:
    """
    Soften the initial consonant of `word` (p→b, t→d, k→g, s→z, m→w̃).

    Words starting with anything else are returned unchanged.
    """
    if not word:
        return word
    softened = lenis_map.get(word[0])
    if softened is None:
        return word
    return softened + word[1:]


def ends_in_glottal_stop(noun: str) -> bool:
    """True if the glottal stop mark appears in the last two characters."""
    return GLOTTAL_STOP in noun[-2:]


def _with_possessive(text: str, possessive: Optional[str]) -> str:
    if possessive:
        return f"{possessive}-{text}"
    return text


def build_subject_text(
    noun: str,
    nominalizer: Optional[str],
    suffix: Optional[str],
    possessive: Optional[str] = None,
) -> str:
    """
    noun                      (pronoun subject, no suffix)
    noun-suffix
    noun-nominalizer-suffix   (nominalized verb stem)

    optionally prefixed with ``possessive-``.
    """
    if suffix is None:
        text = noun
    elif nominalizer:
        text = f"{noun}-{nominalizer}-{suffix}"
    else:
        text = f"{noun}-{suffix}"
    return _with_possessive(text, possessive)


def build_verb_text(stem: str, tense: str, object_pronoun: Optional[str] = None) -> str:
    """``stem-tense``, or ``pronoun-lenis(stem)-tense`` when an object pronoun is prefixed."""
    if not object_pronoun:
        return f"{stem}-{tense}"
    return f"{object_pronoun}-{to_lenis(stem)}-{tense}"


def object_suffix_form(noun: str, suffix: str, nominalizer: Optional[str] = None) -> str:
    """
    Pick the allomorph of the object suffix.

    * nominalized noun: the nominalizer loses its final vowel and fuses
      onto the suffix (dü + eika → deika, weidü + oka → weidoka)
    * otherwise, unless the noun ends in a glottal stop: n- onset
      (eika → neika, oka → noka)

    Suffixes outside the object suffix table are left as they are.
    """
    if suffix not in OBJECT_SUFFIXES:
        return suffix
    if nominalizer:
        return f"{nominalizer[:-1]}{suffix}"
    if ends_in_glottal_stop(noun):
        return suffix
    return f"{_NASAL_ONSET}{suffix}"


def build_object_text(
    noun: str,
    nominalizer: Optional[str],
    suffix: str,
    possessive: Optional[str] = None,
) -> str:
    text = f"{noun}-{object_suffix_form(noun, suffix, nominalizer)}"
    return _with_possessive(text, possessive)
