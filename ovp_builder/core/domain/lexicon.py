# ovp_builder/core/domain/lexicon.py
"""
OWENS VALLEY PAIUTE LEXICON
---------------------------

Static word and morpheme tables used by the sentence builder.

Everything in this module is built once at import time and is read-only
afterwards. The tables are plain mappings from the Paiute surface form
(the *key*) to an English gloss, with two exceptions:

* Pronouns carry explicit person / plurality / proximity / inclusivity
  tags (`PronounEntry`). The choice resolver decides which object pronouns
  agree with which object suffix by looking at `proximity`, never at the
  wording of the gloss.
* Subject and object suffixes are keyed by their `Proximity`.

Downstream code should use the shared `LEXICON` instance:

    from ovp_builder.core.domain.lexicon import LEXICON

    LEXICON.is_transitive("tüka")        # True
    LEXICON.matching_object_suffix("u")  # "oka"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional

from .exceptions import LexiconInvariantError


class Proximity(str, Enum):
    """Deictic distance marking shared by suffixes and third-person pronouns."""
    PROXIMAL = "proximal"
    DISTAL = "distal"


WILDCARD_OPEN = "["
WILDCARD_CLOSE = "]"


def is_wildcard(value: Optional[str]) -> bool:
    """A bracketed word such as ``[dog]`` stands for an out-of-lexicon placeholder."""
    return bool(value) and value.startswith(WILDCARD_OPEN) and value.endswith(WILDCARD_CLOSE)


def as_wildcard(word: str) -> str:
    return f"{WILDCARD_OPEN}{word}{WILDCARD_CLOSE}"


@dataclass(frozen=True)
class PronounEntry:
    """
    A subject or object pronoun.

    `plurality` is a set because several pronouns cover both dual and plural.
    `proximity` is only set for third-person pronouns. Demonstratives ("this",
    "these") are offered by the builder but never picked when translating
    English personal pronouns.
    """

    key: str
    gloss: str
    person: Optional[str] = None
    plurality: FrozenSet[str] = frozenset()
    proximity: Optional[Proximity] = None
    inclusivity: Optional[str] = None
    demonstrative: bool = False

    @property
    def is_third_person(self) -> bool:
        return self.proximity is not None

    def features(self) -> Dict[str, FrozenSet[str]]:
        """Tag name -> accepted values, for the tags this pronoun defines."""
        tags: Dict[str, FrozenSet[str]] = {}
        if self.person:
            tags["person"] = frozenset({self.person})
        if self.plurality:
            tags["plurality"] = self.plurality
        if self.proximity is not None:
            tags["proximity"] = frozenset({self.proximity.value})
        if self.inclusivity:
            tags["inclusivity"] = frozenset({self.inclusivity})
        return tags


def _pronoun(key, gloss, person, plurality=(), proximity=None, inclusivity=None, demonstrative=False) -> PronounEntry:
    return PronounEntry(
        key=key,
        gloss=gloss,
        person=person,
        plurality=frozenset(plurality),
        proximity=proximity,
        inclusivity=inclusivity,
        demonstrative=demonstrative,
    )


_P = Proximity.PROXIMAL
_D = Proximity.DISTAL

# ---------------------------------------------------------------------------
# Raw tables
# ---------------------------------------------------------------------------

NOUNS: Dict[str, str] = {
    "isha'": "coyote",
    "isha'pugu": "dog",
    "kidi'": "cat",
    "pugu": "horse",
    "wai": "rice",
    "tüba": "pinenuts",
    "maishibü": "corn",
    "paya": "water",
    "payahuupü": "river",
    "katünu": "chair",
    "toyabi": "mountain",
    "tuunapi": "food",
    "pasohobü": "tree",
    "nobi": "house",
    "toni": "wickiup",
    "apo": "cup",
    "küna": "wood",
    "tübbi": "rock",
    "tabuutsi'": "cottontail",
    "kamü": "jackrabbit",
    "aaponu'": "apple",
    "tüsüga": "weasle",
    "mukita": "lizard",
    "wo'ada": "mosquito",
    "wükada": "bird snake",
    "wo'abi": "worm",
    "aingwü": "squirrel",
    "tsiipa": "bird",
    "tüwoobü": "earth",
    "koopi'": "coffee",
    "pahabichi": "bear",
    "pagwi": "fish",
    "kwadzi": "tail",
}

POSSESSIVE_PRONOUNS: Dict[str, str] = {
    "i": "my",
    "u": "his/her/its (distal)",
    "ui": "their (distal)",
    "ma": "his/her/its (proximal)",
    "mai": "their (proximal)",
    "a": "his/her/its (proximal)",
    "ai": "their (proximal)",
    "ni": "our (plural, exclusive)",
    "tei": "our (plural, inclusive)",
    "ta": "our (dual), you and I",
    "ü": "your (singular)",
    "üi": "your (plural), you all",
    "tü": "his/her/its own",
    "tüi": "their own",
}

SUBJECT_SUFFIXES: Dict[str, Proximity] = {
    "ii": _P,
    "uu": _D,
}

OBJECT_SUFFIXES: Dict[str, Proximity] = {
    "eika": _P,
    "oka": _D,
}

SUBJECT_PRONOUNS: List[PronounEntry] = [
    _pronoun("nüü", "I", "first", ["singular"]),
    _pronoun("uhu", "he/she/it", "third", ["singular"], _D),
    _pronoun("uhuw̃a", "they", "third", ["plural", "dual"], _D),
    _pronoun("mahu", "he/she/it", "third", ["singular"], _P),
    _pronoun("mahuw̃a", "they", "third", ["plural", "dual"], _P),
    _pronoun("ihi", "this", "third", ["singular"], _P, demonstrative=True),
    _pronoun("ihiw̃a", "these", "third", ["plural", "dual"], _P, demonstrative=True),
    _pronoun("taa", "you and I", "first", ["dual"], inclusivity="inclusive"),
    _pronoun("nüügwa", "we (exclusive)", "first", ["plural", "dual"], inclusivity="exclusive"),
    _pronoun("taagwa", "we (inclusive)", "first", ["plural"], inclusivity="inclusive"),
    _pronoun("üü", "you", "second", ["singular"]),
    _pronoun("üügwa", "you (plural)", "second", ["plural", "dual"]),
]

OBJECT_PRONOUNS: List[PronounEntry] = [
    _pronoun("i", "me", "first", ["singular"]),
    _pronoun("u", "him/her/it (distal)", "third", ["singular"], _D),
    _pronoun("ui", "them (distal)", "third", ["plural", "dual"], _D),
    _pronoun("ma", "him/her/it (proximal)", "third", ["singular"], _P),
    _pronoun("mai", "them (proximal)", "third", ["plural", "dual"], _P),
    _pronoun("a", "him/her/it (proximal)", "third", ["singular"], _P),
    _pronoun("ai", "them (proximal)", "third", ["plural", "dual"], _P),
    _pronoun("ni", "us (plural, exclusive)", "first", ["plural", "dual"], inclusivity="exclusive"),
    _pronoun("tei", "us (plural, inclusive)", "first", ["plural"], inclusivity="inclusive"),
    _pronoun("ta", "us (dual), you and I", "first", ["dual"], inclusivity="inclusive"),
    _pronoun("ü", "you (singular)", "second", ["singular"]),
    _pronoun("üi", "you (plural), you all", "second", ["plural", "dual"]),
]

TENSES: Dict[str, str] = {
    "ku": "completive (past)",
    "ti": "present ongoing (-ing)",
    "dü": "present",
    "wei": "future (will)",
    "gaa-wei": "future (going to)",
    "pü": "have x-ed, am x-ed",
}

NOMINALIZER_TENSES: Dict[str, str] = {
    "dü": "present",
    "weidü": "future (will)",
}

TRANSITIVE_VERBS: Dict[str, str] = {
    "tüka": "eat",
    "puni": "see",
    "hibi": "drink",
    "naka": "hear",
    "kwana": "smell",
    "kwati": "hit",
    "yadohi": "talk to",
    "naki": "chase",
    "tsibui": "climb",
    "sawa": "cook",
    "tama'i": "find",
    "nia": "read",
    "mui": "write",
    "nobini": "visit",
}

INTRANSITIVE_VERBS: Dict[str, str] = {
    "katü": "sit",
    "üwi": "sleep",
    "kwisha'i": "sneeze",
    "poyoha": "run",
    "mia": "go",
    "hukaw̃ia": "walk",
    "wünü": "stand",
    "habi": "lie down",
    "yadoha": "talk",
    "kwatsa'i": "fall",
    "waakü": "work",
    "wükihaa": "smile",
    "hubiadu": "sing",
    "nishua'i": "laugh",
    "tsibui": "climb",
    "tübinohi": "play",
    "yotsi": "fly",
    "nüga": "dance",
    "pahabi": "swim",
    "tünia": "read",
    "tümui": "write",
    "tsiipe'i": "chirp",
}

# Word-initial consonant softening after an object pronoun prefix.
LENIS_MAP: Dict[str, str] = {
    "p": "b",
    "t": "d",
    "k": "g",
    "s": "z",
    "m": "w̃",
}


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


# ---------------------------------------------------------------------------
# Lexicon
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Lexicon:
    """
    Read-only view over the Paiute tables plus the lookups the grammar needs.

    Instances are immutable; share the module-level `LEXICON`.
    """

    nouns: Mapping[str, str]
    possessive_pronouns: Mapping[str, str]
    subject_suffixes: Mapping[str, Proximity]
    object_suffixes: Mapping[str, Proximity]
    subject_pronouns: Mapping[str, PronounEntry]
    object_pronouns: Mapping[str, PronounEntry]
    tenses: Mapping[str, str]
    nominalizer_tenses: Mapping[str, str]
    transitive_verbs: Mapping[str, str]
    intransitive_verbs: Mapping[str, str]
    lenis_map: Mapping[str, str] = field(default_factory=lambda: _frozen(LENIS_MAP))

    # --- Validation -------------------------------------------------------

    def validate(self) -> "Lexicon":
        """Check table invariants; raise LexiconInvariantError on bad data."""
        clash = set(self.nouns) & set(self.subject_pronouns)
        if clash:
            raise LexiconInvariantError(f"keys are both nouns and subject pronouns: {sorted(clash)}")

        for table_name, table in (("subject", self.subject_pronouns), ("object", self.object_pronouns)):
            for key, entry in table.items():
                if key != entry.key:
                    raise LexiconInvariantError(f"{table_name} pronoun '{key}' is filed under the wrong key")
                if not entry.person:
                    raise LexiconInvariantError(f"{table_name} pronoun '{key}' has no person tag")
                if (entry.person == "third") != entry.is_third_person:
                    raise LexiconInvariantError(
                        f"{table_name} pronoun '{key}' must carry a proximity tag iff it is third person"
                    )

        for table_name, suffixes in (("subject", self.subject_suffixes), ("object", self.object_suffixes)):
            if set(suffixes.values()) != set(Proximity):
                raise LexiconInvariantError(f"{table_name} suffixes must cover every proximity exactly once")
            if len(suffixes) != len(Proximity):
                raise LexiconInvariantError(f"{table_name} suffixes must cover every proximity exactly once")

        for key, gloss in self.transitive_verbs.items():
            if key in self.intransitive_verbs and self.intransitive_verbs[key] != gloss:
                raise LexiconInvariantError(f"ambiguous verb '{key}' has two different glosses")

        return self

    # --- Candidate tables (key -> label) ----------------------------------

    @property
    def subject_pronoun_glosses(self) -> Dict[str, str]:
        return {key: entry.gloss for key, entry in self.subject_pronouns.items()}

    @property
    def object_pronoun_glosses(self) -> Dict[str, str]:
        return {key: entry.gloss for key, entry in self.object_pronouns.items()}

    @property
    def subject_suffix_glosses(self) -> Dict[str, str]:
        return {key: prox.value for key, prox in self.subject_suffixes.items()}

    @property
    def object_suffix_glosses(self) -> Dict[str, str]:
        return {key: prox.value for key, prox in self.object_suffixes.items()}

    @property
    def verbs(self) -> Dict[str, str]:
        """Transitive and intransitive stems together (shared stems appear once)."""
        return {**self.transitive_verbs, **self.intransitive_verbs}

    @property
    def subject_heads(self) -> Dict[str, str]:
        """What the subject slot offers: plain nouns and subject pronouns."""
        return {**self.nouns, **self.subject_pronoun_glosses}

    # --- Membership --------------------------------------------------------

    def is_subject_pronoun(self, key: Optional[str]) -> bool:
        return key in self.subject_pronouns

    def is_verb_stem(self, key: Optional[str]) -> bool:
        return key in self.transitive_verbs or key in self.intransitive_verbs

    def is_intransitive(self, verb: Optional[str]) -> bool:
        """Intransitive-only stems. A stem listed in both tables counts as transitive."""
        return verb in self.intransitive_verbs and verb not in self.transitive_verbs

    def is_transitive(self, verb: Optional[str]) -> bool:
        # Wildcards and unknown stems may take an object.
        return not self.is_intransitive(verb)

    def accepts_subject_noun(self, key: str) -> bool:
        """Nouns, subject pronouns and nominalizable verb stems."""
        return key in self.nouns or self.is_subject_pronoun(key) or self.is_verb_stem(key)

    def accepts_object_noun(self, key: str) -> bool:
        return key in self.nouns or self.is_verb_stem(key)

    # --- Proximity agreement -------------------------------------------------

    def third_person_object_pronouns(self, object_suffix: Optional[str] = None) -> List[str]:
        """
        Third-person object pronouns agreeing with `object_suffix`.

        Proximal pronouns are listed before distal ones. An unknown or
        missing suffix returns every third-person pronoun.
        """
        proximal = [k for k, e in self.object_pronouns.items() if e.proximity is Proximity.PROXIMAL]
        distal = [k for k, e in self.object_pronouns.items() if e.proximity is Proximity.DISTAL]
        wanted = self.object_suffixes.get(object_suffix) if object_suffix else None
        if wanted is Proximity.PROXIMAL:
            return proximal
        if wanted is Proximity.DISTAL:
            return distal
        return proximal + distal

    def matching_object_suffix(self, object_pronoun: Optional[str]) -> Optional[str]:
        """The object suffix agreeing with a third-person object pronoun, else None."""
        entry = self.object_pronouns.get(object_pronoun) if object_pronoun else None
        if entry is None or entry.proximity is None:
            return None
        return self.object_suffix_for(entry.proximity)

    def object_suffix_for(self, proximity: Proximity) -> str:
        return next(k for k, p in self.object_suffixes.items() if p is proximity)

    def subject_suffix_for(self, proximity: Proximity) -> str:
        return next(k for k, p in self.subject_suffixes.items() if p is proximity)

    def pronoun_agrees_with_suffix(self, object_pronoun: str, object_suffix: str) -> bool:
        return object_pronoun in self.third_person_object_pronouns(object_suffix)

    # --- Glosses -------------------------------------------------------------

    def verb_gloss(self, verb: str) -> Optional[str]:
        return self.transitive_verbs.get(verb) or self.intransitive_verbs.get(verb)

    def head_gloss(self, key: str) -> str:
        """
        Gloss for a noun-like head (plain noun or nominalized stem).

        Out-of-lexicon words are returned bracketed as untranslated
        placeholders; wildcards are already bracketed.
        """
        gloss = self.nouns.get(key) or self.verb_gloss(key)
        if gloss:
            return gloss
        return key if is_wildcard(key) else as_wildcard(key)

    def stem_gloss(self, verb: str) -> str:
        gloss = self.verb_gloss(verb)
        if gloss:
            return gloss
        return verb if is_wildcard(verb) else as_wildcard(verb)

    # --- Reverse lookups (English -> Paiute) -------------------------------

    @property
    def nouns_by_gloss(self) -> Dict[str, str]:
        return {gloss: key for key, gloss in self.nouns.items()}

    @property
    def transitive_verbs_by_gloss(self) -> Dict[str, str]:
        return {gloss: key for key, gloss in self.transitive_verbs.items()}

    @property
    def intransitive_verbs_by_gloss(self) -> Dict[str, str]:
        return {gloss: key for key, gloss in self.intransitive_verbs.items()}


def build_lexicon() -> Lexicon:
    """Assemble and validate the Paiute lexicon from the raw tables."""
    return Lexicon(
        nouns=_frozen(NOUNS),
        possessive_pronouns=_frozen(POSSESSIVE_PRONOUNS),
        subject_suffixes=_frozen(SUBJECT_SUFFIXES),
        object_suffixes=_frozen(OBJECT_SUFFIXES),
        subject_pronouns=_frozen({p.key: p for p in SUBJECT_PRONOUNS}),
        object_pronouns=_frozen({p.key: p for p in OBJECT_PRONOUNS}),
        tenses=_frozen(TENSES),
        nominalizer_tenses=_frozen(NOMINALIZER_TENSES),
        transitive_verbs=_frozen(TRANSITIVE_VERBS),
        intransitive_verbs=_frozen(INTRANSITIVE_VERBS),
    ).validate()


LEXICON = build_lexicon()
