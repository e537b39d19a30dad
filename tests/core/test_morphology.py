# tests/core/test_morphology.py
import pytest

from ovp_builder.core.domain.morphology import (
    build_object_text,
    build_subject_text,
    build_verb_text,
    ends_in_glottal_stop,
    object_suffix_form,
    to_lenis,
)

@pytest.mark.parametrize(
    "stem, expected",
    [
        ("puni", "buni"),
        ("tüka", "düka"),
        ("kwati", "gwati"),
        ("sawa", "zawa"),
        ("mui", "w̃ui"),
        ("hibi", "hibi"),
        ("naka", "naka"),
        ("yadohi", "yadohi"),
    ],
)
def test_lenis_mutation(stem, expected):
    assert to_lenis(stem) == expected

def test_lenis_of_empty_word():
    assert to_lenis("") == ""

class TestSubjectText:
    def test_pronoun_subject_has_no_suffix(self):
        assert build_subject_text("nüü", None, None) == "nüü"

    def test_noun_with_suffix(self):
        assert build_subject_text("isha'pugu", None, "ii") == "isha'pugu-ii"

    def test_nominalizer_sits_between_stem_and_suffix(self):
        assert build_subject_text("poyoha", "dü", "uu") == "poyoha-dü-uu"

    def test_possessive_prefix(self):
        assert build_subject_text("pugu", None, "ii", "i") == "i-pugu-ii"

class TestVerbText:
    def test_without_object_pronoun(self):
        assert build_verb_text("tüka", "ku") == "tüka-ku"

    def test_object_pronoun_prefix_softens_stem(self):
        assert build_verb_text("puni", "ti", "a") == "a-buni-ti"

    def test_prefix_before_unmutated_stem(self):
        assert build_verb_text("hibi", "wei", "u") == "u-hibi-wei"

class TestObjectText:
    def test_glottal_stop_detection_looks_at_last_two_characters(self):
        assert ends_in_glottal_stop("kidi'")
        assert ends_in_glottal_stop("tama'i")
        assert not ends_in_glottal_stop("isha'pugu")

    def test_n_onset_after_plain_noun(self):
        assert build_object_text("wai", None, "eika") == "wai-neika"
        assert build_object_text("pugu", None, "oka") == "pugu-noka"

    def test_no_onset_after_glottal_stop(self):
        assert build_object_text("kidi'", None, "eika") == "kidi'-eika"

    def test_nominalizer_fuses_onto_suffix(self):
        assert object_suffix_form("poyoha", "eika", "dü") == "deika"
        assert build_object_text("poyoha", "weidü", "oka") == "poyoha-weidoka"

    def test_possessive_prefix(self):
        assert build_object_text("nobi", None, "oka", "ü") == "ü-nobi-noka"
