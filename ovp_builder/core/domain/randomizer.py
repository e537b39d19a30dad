# ovp_builder/core/domain/randomizer.py
"""
Random sentence generator.

Fills in whatever the caller left open with uniformly random legal values,
asking the resolver after every pick so each choice respects the ones made
before it.
"""

from __future__ import annotations

import random
from typing import Any, Optional

import structlog

from .choices import resolve_choices
from .lexicon import LEXICON, Lexicon
from .models import ChoiceMap

logger = structlog.get_logger()

# Upper bound on fill rounds. The grammar settles in a handful of rounds;
# the cap guards against a cycle if resolver rules ever grow one.
MAX_FILL_ROUNDS = 20


def randomize_selection(
    partial: Any = None,
    rng: Optional[random.Random] = None,
    max_rounds: int = MAX_FILL_ROUNDS,
    lexicon: Lexicon = LEXICON,
) -> ChoiceMap:
    """
    Complete `partial` with random values and return the resolved ChoiceMap.

    Values already present in `partial` are kept when legal. Pass a seeded
    `random.Random` for reproducible output.
    """
    rng = rng or random.Random()
    choices = resolve_choices(partial, lexicon)
    selection = choices.selection()

    noun_keys = list(lexicon.nouns)
    if not selection.subject_noun:
        selection = selection.with_values(subject_noun=rng.choice(noun_keys))
    if not selection.verb:
        selection = selection.with_values(verb=rng.choice(list(lexicon.verbs)))
    if lexicon.is_transitive(selection.verb) and not selection.object_noun:
        selection = selection.with_values(object_noun=rng.choice(noun_keys))
    choices = resolve_choices(selection, lexicon)

    for round_no in range(max_rounds):
        missing = next(
            ((name, field) for name, field in choices.items() if field.is_missing and field.choices),
            None,
        )
        if missing is None:
            break
        name, field = missing
        pick = rng.choice(list(field.choices))
        logger.debug("random_choice", field=name, value=pick, round=round_no)
        choices = resolve_choices(choices.selection().with_values(**{name: pick}), lexicon)
    else:
        if not choices.is_complete:
            logger.warning("random_fill_exhausted", rounds=max_rounds, missing=choices.missing_required())

    return choices
