# ovp_builder/core/domain/structured.py
"""
Structured simple-sentence schema.

An English sentence is decomposed (by an external language model) into
simple SV / SVO sentences described with these models. The mapping layer
(`mapping.py`) turns each one into a builder `Selection`.

Example payload for "That runner will eat the coyote.":

    {
      "sentences": [{
        "subject": {"type": "noun", "head": {"lemma": "run", "tense": "present"},
                    "proximity": "distal", "plurality": "singular"},
        "verb": {"lemma": "eat", "tense": "future", "aspect": "simple"},
        "object": {"type": "noun", "head": "coyote",
                   "proximity": "proximal", "plurality": "singular"}
      }]
    }
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

Tense = Literal["past", "present", "future"]
Aspect = Literal["simple", "continuous", "completive", "perfect"]
Person = Literal["first", "second", "third"]
Plurality = Literal["singular", "dual", "plural"]
ProximityTag = Literal["proximal", "distal"]
Inclusivity = Literal["inclusive", "exclusive"]


class PronounFeatures(BaseModel):
    """Person / number / deixis features used to pick a Paiute pronoun."""
    person: Optional[Person] = None
    plurality: Optional[Plurality] = None
    proximity: Optional[ProximityTag] = None
    inclusivity: Optional[Inclusivity] = None
    reflexive: Optional[bool] = None


class PronounPhrase(PronounFeatures):
    type: Literal["pronoun"] = "pronoun"


class NominalizedHead(BaseModel):
    """A verb used as a noun ("the one who runs")."""
    lemma: str
    tense: Tense = "present"


class NounPhrase(BaseModel):
    type: Literal["noun"] = "noun"
    head: Union[str, NominalizedHead]
    proximity: ProximityTag = "proximal"
    plurality: Plurality = "singular"
    possessive: Optional[PronounFeatures] = None


Argument = Annotated[Union[PronounPhrase, NounPhrase], Field(discriminator="type")]


class VerbPhrase(BaseModel):
    lemma: str
    tense: Tense = "present"
    aspect: Aspect = "simple"


class SimpleSentence(BaseModel):
    subject: Argument
    verb: VerbPhrase
    object: Optional[Argument] = None


class SentenceSplit(BaseModel):
    """The decomposition of one English input into simple sentences."""
    sentences: List[SimpleSentence] = Field(default_factory=list)
