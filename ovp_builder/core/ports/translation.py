# ovp_builder/core/ports/translation.py
from typing import Any, Dict, List, Protocol

from ovp_builder.core.domain.structured import SentenceSplit


class ITranslationModel(Protocol):
    """
    Port for the language model behind the translator.
    Adapters wrap a hosted chat model; the core never calls one directly.
    Every call names the model to use (see Settings.SPLIT_MODEL and
    Settings.BACK_TRANSLATION_MODEL).
    """

    async def split_sentence(self, english: str, model: str) -> SentenceSplit:
        """
        Decompose an English sentence into simple SV / SVO sentences.

        Raises:
            Any adapter error; use cases wrap unexpected ones in TranslationError.
        """
        ...

    async def make_sentence(self, split: SentenceSplit, model: str) -> str:
        """Render the simple sentences back as natural English."""
        ...

    async def back_translate(self, structure: List[Dict[str, Any]], model: str) -> str:
        """Turn a back-translation structure (see mapping.back_translation_structure) into English."""
        ...


class ISimilarityScorer(Protocol):
    """Port for semantic similarity between two English texts."""

    async def similarity(self, first: str, second: str) -> float:
        """Returns a score in [0, 1]; 1 means identical meaning."""
        ...
