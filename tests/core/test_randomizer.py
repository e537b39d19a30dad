# tests/core/test_randomizer.py
import random

from ovp_builder.core.domain.assembler import assemble
from ovp_builder.core.domain.lexicon import LEXICON
from ovp_builder.core.domain.models import Assembled, Requirement
from ovp_builder.core.domain.randomizer import randomize_selection

def test_seeded_runs_complete_and_assemble():
    for seed in range(50):
        choices = randomize_selection(rng=random.Random(seed))
        assert choices.is_complete, seed
        assert isinstance(assemble(choices), Assembled), seed

def test_same_seed_same_sentence():
    first = randomize_selection(rng=random.Random(7))
    second = randomize_selection(rng=random.Random(7))
    assert first == second

def test_random_subject_is_a_plain_noun(rng):
    for _ in range(20):
        choices = randomize_selection(rng=rng)
        assert choices.subject_noun.value in LEXICON.nouns

def test_transitive_verb_gets_an_object(rng):
    for _ in range(20):
        choices = randomize_selection({"verb": "tüka"}, rng=rng)
        assert choices.object_noun.value in LEXICON.nouns
        assert choices.object_pronoun.value in LEXICON.third_person_object_pronouns(choices.object_suffix.value)

def test_given_values_are_kept(rng):
    choices = randomize_selection({"subject_noun": "nüü", "verb": "poyoha"}, rng=rng)
    assert choices.subject_noun.value == "nüü"
    assert choices.verb.value == "poyoha"
    assert choices.object_noun.requirement == Requirement.DISABLED
    assert choices.verb_tense.value in LEXICON.tenses
    assert choices.is_complete

def test_illegal_given_values_are_replaced(rng):
    choices = randomize_selection({"verb": "poyoha", "object_noun": "wai"}, rng=rng)
    assert choices.object_noun.value == "wai"
    assert choices.verb.value in LEXICON.transitive_verbs
    assert choices.is_complete

def test_zero_rounds_leaves_selection_incomplete(rng):
    choices = randomize_selection(rng=rng, max_rounds=0)
    assert choices.subject_noun.value
    assert choices.verb.value
    assert not choices.is_complete
    assert "verb_tense" in choices.missing_required()
