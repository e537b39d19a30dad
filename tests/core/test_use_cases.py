# tests/core/test_use_cases.py
import random

import pytest

from ovp_builder.core.domain.exceptions import TranslationError
from ovp_builder.core.domain.mapping import COMPLEX_INPUT_WARNING, GOOD_TRANSLATION_MESSAGE, INACCURATE_WARNING
from ovp_builder.core.domain.models import BuilderState, PhraseRole, Requirement, TranslationResult
from ovp_builder.core.domain.structured import SentenceSplit
from ovp_builder.core.use_cases import BuildSentence, RandomSentence, TranslateBuilder, TranslateEnglish
from ovp_builder.shared.config import settings

DOG_RUNS = {
    "subject": {"type": "noun", "head": "dog", "proximity": "proximal"},
    "verb": {"lemma": "run", "tense": "present", "aspect": "continuous"},
}
UNICORN_GALLOPS = {
    "subject": {"type": "noun", "head": "unicorn"},
    "verb": {"lemma": "gallop", "tense": "past", "aspect": "completive"},
}

class TestBuildSentence:
    def test_incomplete_selection_has_no_sentence(self):
        state = BuildSentence().execute({"subject_noun": "pugu"})

        assert isinstance(state, BuilderState)
        assert state.sentence == []
        assert state.choices["subject_suffix"].requirement == Requirement.REQUIRED
        assert state.choices["subject_suffix"].choices == [("uu", "distal"), ("ii", "proximal")]

    def test_complete_selection_is_assembled(self, noun_subject_selection):
        state = BuildSentence().execute(noun_subject_selection)
        assert [p.text for p in state.sentence] == ["isha'pugu-ii", "poyoha-ti"]

    def test_invalid_values_are_resolved_away(self):
        state = BuildSentence().execute({"subject_noun": "nüü", "subject_suffix": "ii", "verb": "mia", "verb_tense": "ku"})
        assert state.choices["subject_suffix"].value is None
        assert [p.role for p in state.sentence] == [PhraseRole.VERB, PhraseRole.SUBJECT]

class TestRandomSentence:
    def test_seeded_sentence_is_complete(self):
        state = RandomSentence(rng=random.Random(3)).execute()
        assert state.sentence
        assert all(f.requirement != Requirement.REQUIRED or f.value for f in state.choices.values())

    def test_reproducible(self):
        first = RandomSentence(rng=random.Random(11)).execute({"verb": "tüka"})
        second = RandomSentence(rng=random.Random(11)).execute({"verb": "tüka"})
        assert first == second
        assert first.choices["verb"].value == "tüka"

    def test_round_limit_from_settings(self):
        assert RandomSentence().max_rounds == 20
        assert RandomSentence(max_rounds=0).execute().sentence == []

@pytest.mark.asyncio
class TestTranslateBuilder:
    async def test_back_translation_is_cleaned(self, mock_translation_model, noun_subject_selection):
        mock_translation_model.back_translate.return_value = "(The) dog is running."

        english = await TranslateBuilder(mock_translation_model).execute(noun_subject_selection)

        assert english == "The dog is running."
        structure = mock_translation_model.back_translate.call_args.args[0]
        assert structure[0]["word"] == "dog"

    async def test_model_name_is_passed_through(self, mock_translation_model, noun_subject_selection):
        await TranslateBuilder(mock_translation_model, back_translation_model="local-model").execute(
            noun_subject_selection
        )
        assert mock_translation_model.back_translate.call_args.args[1] == "local-model"

    async def test_unexpected_failure_is_wrapped(self, mock_translation_model):
        mock_translation_model.back_translate.side_effect = RuntimeError("rate limited")

        with pytest.raises(TranslationError) as excinfo:
            await TranslateBuilder(mock_translation_model).execute({"subject_noun": "nüü"})
        assert "rate limited" in str(excinfo.value)

@pytest.mark.asyncio
class TestTranslateEnglish:
    async def test_single_sentence(self, mock_translation_model, mock_scorer, rng):
        split = SentenceSplit.model_validate({"sentences": [DOG_RUNS]})
        mock_translation_model.split_sentence.return_value = split
        mock_translation_model.back_translate.return_value = "(The) dog is running."
        mock_translation_model.make_sentence.return_value = "The dog is running."

        result = await TranslateEnglish(mock_translation_model, mock_scorer, rng=rng).execute("The dog is running.")

        assert isinstance(result, TranslationResult)
        assert result.paiute == "isha'pugu-ii poyoha-ti."
        assert result.english == "The dog is running."
        assert result.message == GOOD_TRANSLATION_MESSAGE
        assert result.warning == ""
        mock_translation_model.make_sentence.assert_awaited_once_with(split, settings.SPLIT_MODEL)
        mock_translation_model.split_sentence.assert_awaited_once_with("The dog is running.", settings.SPLIT_MODEL)
        assert mock_translation_model.back_translate.call_args.args[1] == settings.BACK_TRANSLATION_MODEL
        assert mock_scorer.similarity.await_count == 2

    async def test_sentences_are_joined(self, mock_translation_model, mock_scorer, rng):
        mock_translation_model.split_sentence.return_value = SentenceSplit.model_validate(
            {"sentences": [DOG_RUNS, UNICORN_GALLOPS]}
        )
        mock_translation_model.back_translate.side_effect = ["The dog is running.", "The [unicorn] galloped."]

        result = await TranslateEnglish(mock_translation_model, mock_scorer, rng=rng).execute("text")

        # The wildcard sentence still gets a suffix, so it assembles normally.
        assert result.paiute == "isha'pugu-ii poyoha-ti. [unicorn]-ii [gallop]-ku."
        assert result.english == "The dog is running. The [unicorn] galloped."

    async def test_low_similarity_warnings(self, mock_translation_model, mock_scorer, rng):
        mock_translation_model.split_sentence.return_value = SentenceSplit.model_validate({"sentences": [DOG_RUNS]})
        mock_scorer.similarity.side_effect = [0.95, 0.3]

        result = await TranslateEnglish(mock_translation_model, mock_scorer, rng=rng).execute("The dog runs.")
        assert result.warning == INACCURATE_WARNING

        mock_scorer.similarity.side_effect = [0.3, 0.95]
        result = await TranslateEnglish(mock_translation_model, mock_scorer, rng=rng).execute("The dog runs.")
        assert result.warning == COMPLEX_INPUT_WARNING
        assert result.message == ""

    async def test_model_names_are_configurable(self, mock_translation_model, mock_scorer, rng):
        split = SentenceSplit.model_validate({"sentences": [DOG_RUNS]})
        mock_translation_model.split_sentence.return_value = split
        use_case = TranslateEnglish(
            mock_translation_model, mock_scorer, rng=rng, split_model="splitter", back_translation_model="backer"
        )

        await use_case.execute("The dog is running.")

        mock_translation_model.split_sentence.assert_awaited_once_with("The dog is running.", "splitter")
        mock_translation_model.make_sentence.assert_awaited_once_with(split, "splitter")
        assert mock_translation_model.back_translate.call_args.args[1] == "backer"

    async def test_empty_input(self, mock_translation_model, mock_scorer):
        with pytest.raises(TranslationError):
            await TranslateEnglish(mock_translation_model, mock_scorer).execute("   ")
        mock_translation_model.split_sentence.assert_not_called()

    async def test_model_failure_is_wrapped(self, mock_translation_model, mock_scorer):
        mock_translation_model.split_sentence.side_effect = ConnectionError("offline")

        with pytest.raises(TranslationError) as excinfo:
            await TranslateEnglish(mock_translation_model, mock_scorer).execute("The dog runs.")
        assert "offline" in excinfo.value.message
