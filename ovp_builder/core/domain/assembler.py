# ovp_builder/core/domain/assembler.py
"""
SENTENCE ASSEMBLER
------------------

Turns a complete selection into an ordered list of phrases.

`assemble()` returns a tagged result so callers can branch on
"not ready yet" without exceptions:

    result = assemble(selection)
    if isinstance(result, Assembled):
        print(result.text)
    else:
        print("incomplete:", result.reason)

`format_sentence()` is the raising variant for callers that prefer
`AssemblyError`.

Word order is fixed by the subject type:

    pronoun subject,  object   -> object  subject verb
    pronoun subject,  no object -> verb   subject
    noun subject,     object   -> subject object  verb
    noun subject,     no object -> subject verb
"""

from __future__ import annotations

from typing import Any, List, Optional

import structlog

from .exceptions import AssemblyError
from .lexicon import LEXICON, Lexicon
from .models import (
    Assembled,
    AssemblyResult,
    Incomplete,
    MorphemePart,
    PartRole,
    Phrase,
    PhraseRole,
    Selection,
)
from .morphology import build_object_text, build_subject_text, build_verb_text

logger = structlog.get_logger()


def _possessive_part(possessive: Optional[str], lex: Lexicon) -> List[MorphemePart]:
    if not possessive:
        return []
    return [
        MorphemePart(
            role=PartRole.POSSESSIVE_PRONOUN,
            text=possessive,
            gloss=lex.possessive_pronouns.get(possessive),
        )
    ]


def _nominalizer_part(nominalizer: Optional[str], lex: Lexicon) -> List[MorphemePart]:
    if not nominalizer:
        return []
    return [
        MorphemePart(
            role=PartRole.NOMINALIZER,
            text=nominalizer,
            gloss=lex.nominalizer_tenses.get(nominalizer),
        )
    ]


def _subject_phrase(s: Selection, lex: Lexicon) -> Phrase:
    noun = s.subject_noun
    possessive = s.subject_possessive_pronoun
    parts = _possessive_part(possessive, lex)
    if lex.is_subject_pronoun(noun):
        parts.append(MorphemePart(role=PartRole.PRONOUN, text=noun, gloss=lex.subject_pronouns[noun].gloss))
        return Phrase(
            role=PhraseRole.SUBJECT,
            text=build_subject_text(noun, None, None, possessive),
            parts=parts,
        )

    suffix = s.subject_suffix
    suffix_gloss = lex.subject_suffixes[suffix].value if suffix in lex.subject_suffixes else None
    parts.append(MorphemePart(role=PartRole.NOUN, text=noun, gloss=lex.head_gloss(noun)))
    parts.extend(_nominalizer_part(s.subject_noun_nominalizer, lex))
    parts.append(MorphemePart(role=PartRole.SUBJECT_SUFFIX, text=suffix, gloss=suffix_gloss))
    return Phrase(
        role=PhraseRole.SUBJECT,
        text=build_subject_text(noun, s.subject_noun_nominalizer, suffix, possessive),
        parts=parts,
    )


def _verb_phrase(s: Selection, lex: Lexicon) -> Phrase:
    parts: List[MorphemePart] = []
    if s.object_pronoun:
        entry = lex.object_pronouns.get(s.object_pronoun)
        parts.append(
            MorphemePart(
                role=PartRole.OBJECT_PRONOUN,
                text=s.object_pronoun,
                gloss=entry.gloss if entry else None,
            )
        )
    parts.append(MorphemePart(role=PartRole.VERB_STEM, text=s.verb, gloss=lex.stem_gloss(s.verb)))
    parts.append(MorphemePart(role=PartRole.TENSE, text=s.verb_tense, gloss=lex.tenses.get(s.verb_tense)))
    return Phrase(
        role=PhraseRole.VERB,
        text=build_verb_text(s.verb, s.verb_tense, s.object_pronoun),
        parts=parts,
    )


def _object_phrase(s: Selection, lex: Lexicon) -> Phrase:
    suffix = s.object_suffix
    suffix_gloss = lex.object_suffixes[suffix].value if suffix in lex.object_suffixes else None
    parts = _possessive_part(s.object_possessive_pronoun, lex)
    parts.append(MorphemePart(role=PartRole.NOUN, text=s.object_noun, gloss=lex.head_gloss(s.object_noun)))
    parts.extend(_nominalizer_part(s.object_noun_nominalizer, lex))
    parts.append(MorphemePart(role=PartRole.OBJECT_SUFFIX, text=suffix, gloss=suffix_gloss))
    return Phrase(
        role=PhraseRole.OBJECT,
        text=build_object_text(s.object_noun, s.object_noun_nominalizer, suffix, s.object_possessive_pronoun),
        parts=parts,
    )


def _check_ready(s: Selection, lex: Lexicon) -> Optional[str]:
    """Return the reason the selection cannot be assembled, or None."""
    if not s.subject_noun:
        return "Subject noun is required"
    is_pronoun = lex.is_subject_pronoun(s.subject_noun)
    if is_pronoun and s.subject_suffix:
        return "Subject suffix is not allowed with pronouns"
    if not is_pronoun and not s.subject_suffix:
        return "Subject suffix is required with non-pronoun subjects"
    if not s.verb or not s.verb_tense:
        return "Verb and tense are required"
    if (
        s.object_noun
        and s.object_suffix
        and s.object_pronoun
        and not lex.pronoun_agrees_with_suffix(s.object_pronoun, s.object_suffix)
    ):
        return "Object pronoun and suffix do not match"
    return None


def assemble(selection: Any, lexicon: Lexicon = LEXICON) -> AssemblyResult:
    """
    Assemble a complete selection into phrases.

    Returns `Assembled` on success, or `Incomplete` with a reason when the
    selection is missing a slot or contradicts itself. The selection is not
    re-resolved first; callers wanting that should pass resolver output.
    """
    s = Selection.coerce(selection)
    reason = _check_ready(s, lexicon)
    if reason:
        logger.debug("sentence_incomplete", reason=reason)
        return Incomplete(reason=reason)

    subject = _subject_phrase(s, lexicon)
    verb = _verb_phrase(s, lexicon)
    obj = _object_phrase(s, lexicon) if s.object_noun and s.object_suffix else None

    if lexicon.is_subject_pronoun(s.subject_noun):
        phrases = [obj, subject, verb] if obj else [verb, subject]
    else:
        phrases = [subject, obj, verb] if obj else [subject, verb]
    return Assembled(phrases=phrases)


def format_sentence(selection: Any, lexicon: Lexicon = LEXICON) -> List[Phrase]:
    """Like `assemble`, but raises AssemblyError when the sentence is not ready."""
    result = assemble(selection, lexicon)
    if isinstance(result, Incomplete):
        raise AssemblyError(result.reason)
    return result.phrases
