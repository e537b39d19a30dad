# ovp_builder/core/use_cases/build_sentence.py
import random
from typing import Any, Optional

import structlog

from ovp_builder.core.domain.assembler import assemble
from ovp_builder.core.domain.choices import format_choices, resolve_choices
from ovp_builder.core.domain.lexicon import LEXICON, Lexicon
from ovp_builder.core.domain.models import Assembled, BuilderState, ChoiceMap
from ovp_builder.core.domain.randomizer import randomize_selection
from ovp_builder.shared.config import settings
from ovp_builder.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

def _builder_state(choices: ChoiceMap, lexicon: Lexicon) -> BuilderState:
    # Assemble from resolved values only; an incomplete sentence is a normal state here.
    result = assemble(choices.selection(), lexicon)
    sentence = result.phrases if isinstance(result, Assembled) else []
    return BuilderState(choices=format_choices(choices), sentence=sentence)

class BuildSentence:
    """
    Use Case: Interactive sentence building.

    Resolves the caller's partial selection into choices and, once the
    selection is complete, the assembled sentence.
    """

    def __init__(self, lexicon: Lexicon = LEXICON):
        self.lexicon = lexicon

    def execute(self, selection: Any) -> BuilderState:
        with tracer.start_as_current_span("use_case.build_sentence"):
            choices = resolve_choices(selection, self.lexicon)
            state = _builder_state(choices, self.lexicon)
            logger.info(
                "build_sentence",
                complete=bool(state.sentence),
                missing=choices.missing_required(),
            )
            return state

class RandomSentence:
    """
    Use Case: Fill the open slots of a selection with random legal values.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_rounds: Optional[int] = None,
        lexicon: Lexicon = LEXICON,
    ):
        self.rng = rng or random.Random()
        self.max_rounds = max_rounds if max_rounds is not None else settings.RANDOM_FILL_ROUNDS
        self.lexicon = lexicon

    def execute(self, partial: Any = None) -> BuilderState:
        with tracer.start_as_current_span("use_case.random_sentence"):
            choices = randomize_selection(partial, self.rng, self.max_rounds, self.lexicon)
            state = _builder_state(choices, self.lexicon)
            logger.info("random_sentence", text=" ".join(p.text for p in state.sentence))
            return state
