# ovp_builder/core/domain/choices.py
"""
CHOICE RESOLVER
---------------

Given a partial selection, decide for every slot which values are legal,
which value is currently selected, and whether the slot is required,
optional or disabled.

The resolver is a fixed, ordered pipeline of per-slot rules. Each rule sees
the values already resolved by the rules before it, so the order in
`_RULES` is part of the grammar:

    subject_noun -> subject_suffix -> subject_possessive_pronoun
    -> subject_noun_nominalizer -> verb -> verb_tense -> object_pronoun
    -> object_noun -> object_noun_nominalizer -> object_suffix
    -> object_possessive_pronoun

The resolver never raises. Unknown values are dropped, contradictory
values are cleared, and slots whose preconditions are unmet are disabled.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

import structlog

from .lexicon import LEXICON, Lexicon, is_wildcard
from .models import ChoiceField, ChoiceMap, FormattedChoice, Requirement, Selection

logger = structlog.get_logger()

Values = Dict[str, Optional[str]]

# Slots that accept a bracketed placeholder word instead of a lexicon key.
WILDCARD_SLOTS = frozenset({"subject_noun", "verb", "object_noun"})


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


def _membership_checks(lex: Lexicon) -> Dict[str, Callable[[str], bool]]:
    return {
        "subject_noun": lex.accepts_subject_noun,
        "subject_noun_nominalizer": lambda v: v in lex.nominalizer_tenses,
        "subject_suffix": lambda v: v in lex.subject_suffixes,
        "subject_possessive_pronoun": lambda v: v in lex.possessive_pronouns,
        "verb": lex.is_verb_stem,
        "verb_tense": lambda v: v in lex.tenses,
        "object_pronoun": lambda v: v in lex.object_pronouns,
        "object_noun": lex.accepts_object_noun,
        "object_noun_nominalizer": lambda v: v in lex.nominalizer_tenses,
        "object_suffix": lambda v: v in lex.object_suffixes,
        "object_possessive_pronoun": lambda v: v in lex.possessive_pronouns,
    }


def _drop_unknown(selection: Selection, lex: Lexicon) -> Values:
    """Reset every value that is neither in its lexicon table nor a permitted wildcard."""
    values: Values = selection.model_dump()
    for name, is_known in _membership_checks(lex).items():
        value = values.get(name)
        if value is None:
            continue
        if name in WILDCARD_SLOTS and is_wildcard(value):
            continue
        if not is_known(value):
            logger.debug("selection_value_dropped", field=name, value=value, reason="unknown")
            values[name] = None
    return values


def _clear(values: Values, name: str, reason: str) -> None:
    logger.debug("selection_value_dropped", field=name, value=values[name], reason=reason)
    values[name] = None


def _reconcile_object(values: Values, lex: Lexicon) -> None:
    """
    Settle object pronoun / object suffix / object noun conflicts up front.

    * A pronoun and suffix of different proximity: the suffix goes.
    * A first- or second-person pronoun on a transitive verb leaves no room
      for an object noun: the noun goes.
    """
    pronoun = values["object_pronoun"]
    suffix = values["object_suffix"]
    if pronoun and suffix and not lex.pronoun_agrees_with_suffix(pronoun, suffix):
        _clear(values, "object_suffix", "proximity_mismatch")

    verb = values["verb"]
    if (
        pronoun
        and values["object_noun"]
        and verb
        and lex.is_transitive(verb)
        and not lex.object_pronouns[pronoun].is_third_person
    ):
        _clear(values, "object_noun", "pronoun_not_third_person")


# ---------------------------------------------------------------------------
# Per-slot rules
# ---------------------------------------------------------------------------


def _subject_noun(v: Values, lex: Lexicon) -> ChoiceField:
    return ChoiceField(choices=lex.subject_heads, value=v["subject_noun"], requirement=Requirement.REQUIRED)


def _subject_takes_suffix(v: Values, lex: Lexicon) -> bool:
    noun = v["subject_noun"]
    return bool(noun) and not lex.is_subject_pronoun(noun)


def _subject_suffix(v: Values, lex: Lexicon) -> ChoiceField:
    if not _subject_takes_suffix(v, lex):
        return ChoiceField.disabled()
    return ChoiceField(
        choices=lex.subject_suffix_glosses,
        value=v["subject_suffix"],
        requirement=Requirement.REQUIRED,
    )


def _subject_possessive_pronoun(v: Values, lex: Lexicon) -> ChoiceField:
    if not _subject_takes_suffix(v, lex):
        return ChoiceField.disabled()
    return ChoiceField(
        choices=dict(lex.possessive_pronouns),
        value=v["subject_possessive_pronoun"],
        requirement=Requirement.OPTIONAL,
    )


def _subject_noun_nominalizer(v: Values, lex: Lexicon) -> ChoiceField:
    if not lex.is_verb_stem(v["subject_noun"]):
        return ChoiceField.disabled()
    return ChoiceField(
        choices=dict(lex.nominalizer_tenses),
        value=v["subject_noun_nominalizer"],
        requirement=Requirement.REQUIRED,
    )


def _verb(v: Values, lex: Lexicon) -> ChoiceField:
    verb = v["verb"]
    if v["object_noun"]:
        return ChoiceField(
            choices=dict(lex.transitive_verbs),
            value=verb if verb and lex.is_transitive(verb) else None,
            requirement=Requirement.REQUIRED,
        )
    return ChoiceField(choices=lex.verbs, value=verb, requirement=Requirement.REQUIRED)


def _verb_tense(v: Values, lex: Lexicon) -> ChoiceField:
    if not v["verb"]:
        return ChoiceField.disabled()
    return ChoiceField(choices=dict(lex.tenses), value=v["verb_tense"], requirement=Requirement.REQUIRED)


def _object_pronoun(v: Values, lex: Lexicon) -> ChoiceField:
    verb = v["verb"]
    if not verb or lex.is_intransitive(verb):
        return ChoiceField.disabled()
    glosses = lex.object_pronoun_glosses
    if v["object_noun"]:
        # The pronoun prefix on the verb must agree with the object noun's suffix.
        matching = lex.third_person_object_pronouns(v["object_suffix"])
        return ChoiceField(
            choices={key: glosses[key] for key in matching},
            value=v["object_pronoun"],
            requirement=Requirement.REQUIRED,
        )
    return ChoiceField(choices=glosses, value=v["object_pronoun"], requirement=Requirement.OPTIONAL)


def _object_noun(v: Values, lex: Lexicon) -> ChoiceField:
    verb = v["verb"]
    pronoun = v["object_pronoun"]
    if (verb and lex.is_intransitive(verb)) or (pronoun and not lex.object_pronouns[pronoun].is_third_person):
        return ChoiceField.disabled()
    return ChoiceField(choices=dict(lex.nouns), value=v["object_noun"], requirement=Requirement.OPTIONAL)


def _object_noun_nominalizer(v: Values, lex: Lexicon) -> ChoiceField:
    if not lex.is_verb_stem(v["object_noun"]):
        return ChoiceField.disabled()
    return ChoiceField(
        choices=dict(lex.nominalizer_tenses),
        value=v["object_noun_nominalizer"],
        requirement=Requirement.REQUIRED,
    )


def _object_suffix(v: Values, lex: Lexicon) -> ChoiceField:
    if not v["object_noun"]:
        return ChoiceField.disabled()
    glosses = lex.object_suffix_glosses
    pronoun = v["object_pronoun"]
    if pronoun:
        match = lex.matching_object_suffix(pronoun)
        suffix = v["object_suffix"]
        return ChoiceField(
            choices={match: glosses[match]} if match else {},
            value=suffix if suffix == match else None,
            requirement=Requirement.REQUIRED,
        )
    return ChoiceField(choices=glosses, value=v["object_suffix"], requirement=Requirement.REQUIRED)


def _object_possessive_pronoun(v: Values, lex: Lexicon) -> ChoiceField:
    if not v["object_noun"]:
        return ChoiceField.disabled()
    return ChoiceField(
        choices=dict(lex.possessive_pronouns),
        value=v["object_possessive_pronoun"],
        requirement=Requirement.OPTIONAL,
    )


Rule = Callable[[Values, Lexicon], ChoiceField]

_RULES: Tuple[Tuple[str, Rule], ...] = (
    ("subject_noun", _subject_noun),
    ("subject_suffix", _subject_suffix),
    ("subject_possessive_pronoun", _subject_possessive_pronoun),
    ("subject_noun_nominalizer", _subject_noun_nominalizer),
    ("verb", _verb),
    ("verb_tense", _verb_tense),
    ("object_pronoun", _object_pronoun),
    ("object_noun", _object_noun),
    ("object_noun_nominalizer", _object_noun_nominalizer),
    ("object_suffix", _object_suffix),
    ("object_possessive_pronoun", _object_possessive_pronoun),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def resolve_choices(selection: Any = None, lexicon: Lexicon = LEXICON) -> ChoiceMap:
    """
    Compute the ChoiceMap for a (possibly partial, possibly invalid) selection.

    Accepts a Selection, a ChoiceMap, a plain mapping of slot values, or None.
    """
    values = _drop_unknown(Selection.coerce(selection), lexicon)
    _reconcile_object(values, lexicon)

    fields: Dict[str, ChoiceField] = {}
    for name, rule in _RULES:
        field = rule(values, lexicon)
        if field.requirement == Requirement.REQUIRED and not field.choices:
            # Only reachable through broken lexicon data.
            logger.error("required_field_without_candidates", field=name, value=field.value)
        if values[name] is not None and field.value is None:
            logger.debug("selection_value_dropped", field=name, value=values[name], reason=field.requirement.value)
        values[name] = field.value
        fields[name] = field

    return ChoiceMap(**fields)


def format_choices(choice_map: ChoiceMap) -> Dict[str, FormattedChoice]:
    """Candidates as (key, label) pairs sorted by label, for display."""
    formatted: Dict[str, FormattedChoice] = {}
    for name, field in choice_map.items():
        pairs: List[Tuple[str, str]] = sorted(field.choices.items(), key=lambda kv: kv[1])
        formatted[name] = FormattedChoice(choices=pairs, value=field.value, requirement=field.requirement)
    return formatted
