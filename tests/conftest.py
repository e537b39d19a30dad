# tests/conftest.py
import random

import pytest
import structlog
from unittest.mock import AsyncMock, MagicMock

from ovp_builder.core.ports.translation import ISimilarityScorer, ITranslationModel

@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep structlog on its defaults so log output never outlives a captured stream."""
    yield
    structlog.reset_defaults()

@pytest.fixture
def rng():
    """A seeded random source so random sentences are reproducible."""
    return random.Random(1234)

@pytest.fixture(scope="function")
def mock_translation_model():
    """Returns a mock implementation of the translation model port."""
    model = MagicMock(spec=ITranslationModel)
    # Async methods must be mocked with AsyncMock
    model.split_sentence = AsyncMock()
    model.make_sentence = AsyncMock(return_value="")
    model.back_translate = AsyncMock(return_value="")
    return model

@pytest.fixture(scope="function")
def mock_scorer():
    """Returns a mock similarity scorer that rates everything as a close match."""
    scorer = MagicMock(spec=ISimilarityScorer)
    scorer.similarity = AsyncMock(return_value=0.95)
    return scorer

@pytest.fixture
def noun_subject_selection():
    """'The dog is running.' with a full-noun subject."""
    return {
        "subject_noun": "isha'pugu",
        "subject_suffix": "ii",
        "verb": "poyoha",
        "verb_tense": "ti",
    }

@pytest.fixture
def pronoun_subject_with_object():
    """'I ate the rice.' with a pronoun subject and a noun object."""
    return {
        "subject_noun": "nüü",
        "verb": "tüka",
        "verb_tense": "ku",
        "object_noun": "wai",
        "object_suffix": "eika",
    }
