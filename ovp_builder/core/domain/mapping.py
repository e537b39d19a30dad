# ovp_builder/core/domain/mapping.py
"""
Deterministic glue between English structures and builder selections.

* `translate_simple`: structured simple sentence -> `Selection`
* `back_translation_structure`: `Selection` -> word list for back-translation
* `render_unchecked`: best-effort surface string when assembly refuses
* `assess_translation`: similarity scores -> user-facing verdict

No model calls happen here; the use cases feed these helpers with the
output of the translation ports.
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import structlog

from .lexicon import LEXICON, Lexicon, PronounEntry, Proximity, as_wildcard
from .models import Selection
from .morphology import to_lenis
from .structured import NominalizedHead, NounPhrase, PronounFeatures, SimpleSentence

logger = structlog.get_logger()

# (tense, aspect) -> tense suffix
TENSE_SUFFIXES: Dict[str, Dict[str, str]] = {
    "present": {"continuous": "ti", "completive": "ti", "simple": "dü", "perfect": "pü"},
    "past": {"continuous": "ti", "completive": "ku", "simple": "ti", "perfect": "pü"},
    "future": {"continuous": "wei", "completive": "wei", "simple": "wei", "perfect": "wei"},
}
DEFAULT_TENSE_SUFFIX = "dü"

_PRONOUN_TAGS = ("person", "plurality", "inclusivity", "proximity")

DEFAULT_QUALITY_THRESHOLD = 0.8
COMPLEX_INPUT_WARNING = (
    "The input sentence is complex, so a lot of meaning may have been lost "
    "in breaking it down into simple sentences."
)
INACCURATE_WARNING = "The translation doesn't seem to be very accurate."
GOOD_TRANSLATION_MESSAGE = "The translation is probably pretty good!"


# ---------------------------------------------------------------------------
# Feature -> morpheme lookups
# ---------------------------------------------------------------------------


def match_pronoun(
    features: Union[PronounFeatures, Mapping[str, Any]],
    table: Mapping[str, PronounEntry],
    rng: Optional[random.Random] = None,
) -> str:
    """
    Pick a pronoun whose tags accept every feature given.

    A tag the pronoun does not define, or a feature left unset, does not
    constrain the match. Demonstratives are never picked. Ties are broken
    at random. With no match at all, the first pronoun of the table is
    returned.
    """
    wanted = features.model_dump() if isinstance(features, PronounFeatures) else dict(features)
    matches: List[str] = []
    for key, entry in table.items():
        if entry.demonstrative:
            continue
        tags = entry.features()
        if all(
            not wanted.get(tag) or tag not in tags or wanted[tag] in tags[tag]
            for tag in _PRONOUN_TAGS
        ):
            matches.append(key)

    if not matches:
        fallback = next(iter(table))
        logger.warning("pronoun_not_matched", features=wanted, fallback=fallback)
        return fallback
    return (rng or random).choice(matches)


def tense_suffix(tense: Optional[str], aspect: Optional[str]) -> str:
    by_aspect = TENSE_SUFFIXES.get(tense or "", TENSE_SUFFIXES["present"])
    return by_aspect.get(aspect or "", DEFAULT_TENSE_SUFFIX)


def nominalizer_for(tense: Optional[str]) -> str:
    return "weidü" if tense == "future" else "dü"


def _proximity(tag: Optional[str]) -> Proximity:
    return Proximity.DISTAL if tag == Proximity.DISTAL.value else Proximity.PROXIMAL


# ---------------------------------------------------------------------------
# English structure -> Selection
# ---------------------------------------------------------------------------


def _noun_head(head: Union[str, NominalizedHead], lex: Lexicon, transitive_first: bool) -> Tuple[str, Optional[str]]:
    """Return (noun key or wildcard, nominalizer or None) for an English head."""
    if isinstance(head, str):
        return lex.nouns_by_gloss.get(head.lower()) or as_wildcard(head), None

    lemma = head.lemma.lower()
    first, second = lex.intransitive_verbs_by_gloss, lex.transitive_verbs_by_gloss
    if transitive_first:
        first, second = second, first
    stem = first.get(lemma) or second.get(lemma) or as_wildcard(lemma)
    return stem, nominalizer_for(head.tense)


def translate_simple(
    sentence: SimpleSentence,
    rng: Optional[random.Random] = None,
    lexicon: Lexicon = LEXICON,
) -> Selection:
    """Map one structured simple sentence onto builder slots."""
    values: Dict[str, Optional[str]] = {}

    subject = sentence.subject
    if isinstance(subject, NounPhrase):
        values["subject_noun"], values["subject_noun_nominalizer"] = _noun_head(subject.head, lexicon, False)
        values["subject_suffix"] = lexicon.subject_suffix_for(_proximity(subject.proximity))
    else:
        values["subject_noun"] = match_pronoun(subject, lexicon.subject_pronouns, rng)

    lemma = sentence.verb.lemma.lower()
    stem = lexicon.transitive_verbs_by_gloss.get(lemma)
    if sentence.object is None:
        stem = lexicon.intransitive_verbs_by_gloss.get(lemma) or stem
    values["verb"] = stem or as_wildcard(lemma)
    values["verb_tense"] = tense_suffix(sentence.verb.tense, sentence.verb.aspect)

    obj = sentence.object
    if isinstance(obj, NounPhrase):
        values["object_noun"], values["object_noun_nominalizer"] = _noun_head(obj.head, lexicon, True)
        values["object_suffix"] = lexicon.object_suffix_for(_proximity(obj.proximity))
        # The verb carries a third-person prefix agreeing with the noun.
        values["object_pronoun"] = match_pronoun(
            {"person": "third", "plurality": obj.plurality, "proximity": obj.proximity},
            lexicon.object_pronouns,
            rng,
        )
    elif obj is not None:
        values["object_pronoun"] = match_pronoun(obj, lexicon.object_pronouns, rng)

    return Selection(**values)


# ---------------------------------------------------------------------------
# Selection -> back-translation structure
# ---------------------------------------------------------------------------


def _head_info(
    noun: str,
    nominalizer: Optional[str],
    positional: Optional[str],
    possessive: Optional[str],
    lex: Lexicon,
) -> Dict[str, Any]:
    info: Dict[str, Any] = {}
    if nominalizer:
        info["word"] = lex.verb_gloss(noun) or noun
        info["agent_nominalizer"] = lex.nominalizer_tenses.get(nominalizer)
    else:
        info["word"] = lex.nouns.get(noun, noun)
    if positional:
        info["positional"] = positional
    if possessive and possessive in lex.possessive_pronouns:
        info["possessive"] = lex.possessive_pronouns[possessive]
    return info


def back_translation_structure(selection: Any, lexicon: Lexicon = LEXICON) -> List[Dict[str, Any]]:
    """
    Describe a selection as [subject, object?, verb] word records in English.

    This is the input handed to a language model for Paiute -> English.
    """
    s = Selection.coerce(selection)
    structure: List[Dict[str, Any]] = []

    subject: Dict[str, Any] = {"part_of_speech": "subject"}
    if s.subject_noun and lexicon.is_subject_pronoun(s.subject_noun):
        subject["word"] = lexicon.subject_pronouns[s.subject_noun].gloss
    elif s.subject_noun and (s.subject_noun_nominalizer or s.subject_noun in lexicon.nouns):
        positional = lexicon.subject_suffix_glosses.get(s.subject_suffix or "")
        subject.update(
            _head_info(s.subject_noun, s.subject_noun_nominalizer, positional, s.subject_possessive_pronoun, lexicon)
        )
    elif s.subject_noun:
        # Placeholder subjects are passed through as a bare word.
        subject["word"] = s.subject_noun
    structure.append(subject)

    if s.object_noun:
        positional = lexicon.object_suffix_glosses.get(s.object_suffix or "")
        obj = {"part_of_speech": "object"}
        obj.update(_head_info(s.object_noun, s.object_noun_nominalizer, positional, s.object_possessive_pronoun, lexicon))
        structure.append(obj)
    elif s.object_pronoun and s.object_pronoun in lexicon.object_pronouns:
        structure.append({"part_of_speech": "object", "word": lexicon.object_pronouns[s.object_pronoun].gloss})

    verb: Dict[str, Any] = {"part_of_speech": "verb"}
    if s.verb:
        verb["word"] = lexicon.verb_gloss(s.verb) or s.verb
    if s.verb_tense in lexicon.tenses:
        verb["tense"] = lexicon.tenses[s.verb_tense]
    structure.append(verb)
    return structure


# ---------------------------------------------------------------------------
# Fallbacks and verdicts
# ---------------------------------------------------------------------------


def render_unchecked(selection: Any) -> str:
    """
    Build a surface string without the assembler's checks.

    Used when a translated selection cannot be assembled (for example a
    wildcard subject with no suffix); word order is always S (O) V.
    """
    s = Selection.coerce(selection)
    words: List[str] = []
    subject = s.subject_noun or ""
    words.append(f"{subject}-{s.subject_suffix}" if s.subject_suffix else subject)
    if s.object_noun and s.object_suffix:
        words.append(f"{s.object_noun}-{s.object_suffix}")
    verb = s.verb or ""
    if s.object_pronoun:
        words.append(f"{s.object_pronoun}-{to_lenis(verb)}-{s.verb_tense}")
    else:
        words.append(f"{verb}-{s.verb_tense}")
    return " ".join(w for w in words if w)


def assess_translation(
    simple_similarity: float,
    back_similarity: float,
    threshold: float = DEFAULT_QUALITY_THRESHOLD,
) -> Tuple[str, str]:
    """
    Return (message, warning); exactly one of them is non-empty.

    `simple_similarity` compares the input with its simplified English;
    `back_similarity` compares the input with the back-translation.
    """
    if simple_similarity < threshold:
        return "", COMPLEX_INPUT_WARNING
    if back_similarity < threshold:
        return "", INACCURATE_WARNING
    return GOOD_TRANSLATION_MESSAGE, ""
