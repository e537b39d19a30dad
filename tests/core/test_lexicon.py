# tests/core/test_lexicon.py
import dataclasses

import pytest

from ovp_builder.core.domain.exceptions import LexiconInvariantError
from ovp_builder.core.domain.lexicon import (
    LEXICON,
    Proximity,
    PronounEntry,
    is_wildcard,
)

class TestTables:
    def test_noun_and_pronoun_keys_are_disjoint(self):
        assert not set(LEXICON.nouns) & set(LEXICON.subject_pronouns)

    def test_closed_enumerations(self):
        assert set(LEXICON.subject_suffixes) == {"ii", "uu"}
        assert set(LEXICON.object_suffixes) == {"eika", "oka"}
        assert len(LEXICON.tenses) == 6
        assert set(LEXICON.nominalizer_tenses) == {"dü", "weidü"}

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            LEXICON.nouns["new"] = "thing"
        with pytest.raises(dataclasses.FrozenInstanceError):
            LEXICON.nouns = {}

    def test_combined_verbs_list_shared_stem_once(self):
        verbs = LEXICON.verbs
        assert "tsibui" in verbs
        assert len(verbs) == len(LEXICON.transitive_verbs) + len(LEXICON.intransitive_verbs) - 1

class TestTransitivity:
    def test_transitive_only(self):
        assert LEXICON.is_transitive("tüka")
        assert not LEXICON.is_intransitive("tüka")

    def test_intransitive_only(self):
        assert LEXICON.is_intransitive("poyoha")
        assert not LEXICON.is_transitive("poyoha")

    def test_ambiguous_stem_counts_as_transitive(self):
        assert LEXICON.is_transitive("tsibui")

    def test_wildcard_verb_may_take_an_object(self):
        assert LEXICON.is_transitive("[jump]")

class TestProximity:
    def test_third_person_pronouns_carry_explicit_proximity(self):
        assert LEXICON.object_pronouns["u"].proximity is Proximity.DISTAL
        assert LEXICON.object_pronouns["ma"].proximity is Proximity.PROXIMAL
        assert LEXICON.object_pronouns["i"].proximity is None

    def test_demonstratives_stay_in_the_builder(self):
        assert LEXICON.subject_pronouns["ihi"].demonstrative
        assert not LEXICON.subject_pronouns["mahu"].demonstrative
        assert "ihiw̃a" in LEXICON.subject_heads

    def test_pronouns_for_suffix(self):
        assert LEXICON.third_person_object_pronouns("eika") == ["ma", "mai", "a", "ai"]
        assert LEXICON.third_person_object_pronouns("oka") == ["u", "ui"]
        assert LEXICON.third_person_object_pronouns(None) == ["ma", "mai", "a", "ai", "u", "ui"]

    def test_matching_suffix(self):
        assert LEXICON.matching_object_suffix("ai") == "eika"
        assert LEXICON.matching_object_suffix("ui") == "oka"
        assert LEXICON.matching_object_suffix("ü") is None
        assert LEXICON.matching_object_suffix(None) is None

class TestGlosses:
    def test_nominalized_stem_uses_verb_gloss(self):
        assert LEXICON.head_gloss("poyoha") == "run"

    def test_unknown_word_is_bracketed(self):
        assert LEXICON.head_gloss("unicorn") == "[unicorn]"
        assert LEXICON.stem_gloss("fly-away") == "[fly-away]"

    def test_wildcard_is_not_bracketed_twice(self):
        assert is_wildcard("[dog]")
        assert LEXICON.head_gloss("[dog]") == "[dog]"

    def test_reverse_lookup(self):
        assert LEXICON.nouns_by_gloss["dog"] == "isha'pugu"
        assert LEXICON.intransitive_verbs_by_gloss["run"] == "poyoha"

class TestValidation:
    def test_shared_lexicon_is_valid(self):
        assert LEXICON.validate() is LEXICON

    def test_third_person_without_proximity_is_rejected(self):
        broken = dict(LEXICON.object_pronouns)
        broken["u"] = PronounEntry(key="u", gloss="him", person="third")
        with pytest.raises(LexiconInvariantError):
            dataclasses.replace(LEXICON, object_pronouns=broken).validate()

    def test_noun_pronoun_clash_is_rejected(self):
        nouns = {**LEXICON.nouns, "nüü": "me-noun"}
        with pytest.raises(LexiconInvariantError):
            dataclasses.replace(LEXICON, nouns=nouns).validate()
