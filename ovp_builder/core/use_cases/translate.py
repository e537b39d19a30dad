# ovp_builder/core/use_cases/translate.py
import asyncio
import random
import re
from typing import Any, List, Optional

import structlog

from ovp_builder.core.domain.assembler import assemble
from ovp_builder.core.domain.exceptions import DomainError, TranslationError
from ovp_builder.core.domain.lexicon import LEXICON, Lexicon
from ovp_builder.core.domain.mapping import (
    assess_translation,
    back_translation_structure,
    render_unchecked,
    translate_simple,
)
from ovp_builder.core.domain.models import Assembled, Selection, TranslationResult
from ovp_builder.core.ports.translation import ISimilarityScorer, ITranslationModel
from ovp_builder.shared.config import settings
from ovp_builder.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

_PARENTHESES = re.compile(r"[()]")
_TRAILING_PERIOD = re.compile(r"\.$")

def _clean_back_translation(text: str) -> str:
    return _PARENTHESES.sub("", text)

class TranslateBuilder:
    """
    Use Case: Paiute -> English for a sentence-builder selection.
    """

    def __init__(
        self,
        model: ITranslationModel,
        back_translation_model: Optional[str] = None,
        lexicon: Lexicon = LEXICON,
    ):
        self.model = model
        self.back_translation_model = back_translation_model or settings.BACK_TRANSLATION_MODEL
        self.lexicon = lexicon

    async def execute(self, selection: Any) -> str:
        with tracer.start_as_current_span("use_case.translate_builder"):
            structure = back_translation_structure(selection, self.lexicon)
            logger.info("builder_translation_started", words=len(structure))
            try:
                english = await self.model.back_translate(structure, self.back_translation_model)
            except DomainError:
                raise
            except Exception as e:
                logger.error("builder_translation_failed", error=str(e), exc_info=True)
                raise TranslationError(f"Unexpected back-translation failure: {str(e)}")
            return _clean_back_translation(english)

class TranslateEnglish:
    """
    Use Case: English -> Paiute translation pipeline.

    Responsibilities:
    1. Splits the input into simple sentences (translation model port).
    2. Maps each one onto builder slots and assembles it; when assembly
       refuses, falls back to an unchecked rendering.
    3. Back-translates every Paiute sentence and regenerates the simplified
       English.
    4. Scores both against the input and attaches a quality verdict.
    """

    def __init__(
        self,
        model: ITranslationModel,
        scorer: ISimilarityScorer,
        rng: Optional[random.Random] = None,
        threshold: Optional[float] = None,
        split_model: Optional[str] = None,
        back_translation_model: Optional[str] = None,
        lexicon: Lexicon = LEXICON,
    ):
        self.model = model
        self.split_model = split_model or settings.SPLIT_MODEL
        self.back_translation_model = back_translation_model or settings.BACK_TRANSLATION_MODEL
        self.scorer = scorer
        self.rng = rng or random.Random()
        self.threshold = threshold if threshold is not None else settings.TRANSLATION_QUALITY_THRESHOLD
        self.lexicon = lexicon

    def _render(self, selection: Selection) -> str:
        result = assemble(selection, self.lexicon)
        if isinstance(result, Assembled):
            return result.text
        logger.info("translation_fallback_render", reason=result.reason)
        return render_unchecked(selection)

    async def execute(self, english: str) -> TranslationResult:
        if not english or not english.strip():
            raise TranslationError("English text is required")

        with tracer.start_as_current_span("use_case.translate_english") as span:
            span.set_attribute("app.input_length", len(english))
            logger.info("translation_started", text_preview=english[:50])

            try:
                split = await self.model.split_sentence(english, self.split_model)

                targets: List[str] = []
                backs: List[str] = []
                for sentence in split.sentences:
                    selection = translate_simple(sentence, self.rng, self.lexicon)
                    targets.append(self._render(selection))
                    back = await self.model.back_translate(
                        back_translation_structure(selection, self.lexicon), self.back_translation_model
                    )
                    backs.append(_TRAILING_PERIOD.sub("", _clean_back_translation(back).strip()))

                simple_english = await self.model.make_sentence(split, self.split_model)

                paiute = ". ".join(targets) + "."
                back_english = ". ".join(backs) + "."

                sim_simple, sim_back = await asyncio.gather(
                    self.scorer.similarity(english, simple_english),
                    self.scorer.similarity(english, back_english),
                )
            except DomainError:
                raise
            except Exception as e:
                logger.error("translation_failed", error=str(e), exc_info=True)
                raise TranslationError(f"Unexpected translation failure: {str(e)}")

            message, warning = assess_translation(sim_simple, sim_back, self.threshold)
            span.set_attribute("app.sentence_count", len(targets))
            logger.info(
                "translation_success",
                sentences=len(targets),
                simple_similarity=sim_simple,
                back_similarity=sim_back,
            )
            return TranslationResult(english=back_english, paiute=paiute, message=message, warning=warning)
