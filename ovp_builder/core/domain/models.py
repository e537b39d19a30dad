# ovp_builder/core/domain/models.py
from enum import Enum
from typing import Any, Dict, Iterator, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import AssemblyError

# --- Enums ---

class Requirement(str, Enum):
    """How the builder UI must treat a slot given the other selections."""
    REQUIRED = "required"
    OPTIONAL = "optional"
    DISABLED = "disabled"   # Preconditions unmet; value is always None

class PhraseRole(str, Enum):
    SUBJECT = "subject"
    VERB = "verb"
    OBJECT = "object"

class PartRole(str, Enum):
    """Role of a single morpheme inside an assembled phrase."""
    PRONOUN = "pronoun"
    NOUN = "noun"
    POSSESSIVE_PRONOUN = "possessive_pronoun"
    NOMINALIZER = "nominalizer"
    SUBJECT_SUFFIX = "subject_suffix"
    OBJECT_PRONOUN = "object_pronoun"
    VERB_STEM = "verb_stem"
    TENSE = "tense"
    OBJECT_SUFFIX = "object_suffix"

# Order in which the resolver decides the slots (later slots depend on earlier ones).
CHOICE_ORDER: Tuple[str, ...] = (
    "subject_noun",
    "subject_suffix",
    "subject_possessive_pronoun",
    "subject_noun_nominalizer",
    "verb",
    "verb_tense",
    "object_pronoun",
    "object_noun",
    "object_noun_nominalizer",
    "object_suffix",
    "object_possessive_pronoun",
)

# --- Selection ---

class Selection(BaseModel):
    """
    The caller's partial grammatical choices, one optional value per slot.

    Construction never fails on odd input: non-string values and empty
    strings become None, and ``{"value": ...}`` wrappers (as found in a
    serialized ChoiceMap) are unwrapped.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    subject_noun: Optional[str] = None
    subject_noun_nominalizer: Optional[str] = None
    subject_suffix: Optional[str] = None
    subject_possessive_pronoun: Optional[str] = None
    verb: Optional[str] = None
    verb_tense: Optional[str] = None
    object_pronoun: Optional[str] = None
    object_noun: Optional[str] = None
    object_noun_nominalizer: Optional[str] = None
    object_suffix: Optional[str] = None
    object_possessive_pronoun: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_slot(cls, value: Any) -> Optional[str]:
        if isinstance(value, Mapping):
            value = value.get("value")
        if not isinstance(value, str) or not value:
            return None
        return value

    @classmethod
    def coerce(cls, data: Any) -> "Selection":
        """Build a Selection from a Selection, a ChoiceMap, a mapping, or None."""
        if isinstance(data, Selection):
            return data
        if isinstance(data, ChoiceMap):
            return data.selection()
        if isinstance(data, Mapping):
            return cls.model_validate({str(k): v for k, v in data.items()})
        return cls()

    def with_values(self, **changes: Optional[str]) -> "Selection":
        return self.model_validate({**self.model_dump(), **changes})

# --- Choices ---

class ChoiceField(BaseModel):
    """Resolver output for one slot."""
    choices: Dict[str, str] = Field(default_factory=dict)  # key -> English label
    value: Optional[str] = None
    requirement: Requirement

    @classmethod
    def disabled(cls) -> "ChoiceField":
        return cls(choices={}, value=None, requirement=Requirement.DISABLED)

    @property
    def is_missing(self) -> bool:
        """Required but not yet filled."""
        return self.requirement == Requirement.REQUIRED and not self.value

class ChoiceMap(BaseModel):
    """Per-slot candidates, current values and requirement levels."""
    subject_noun: ChoiceField
    subject_suffix: ChoiceField
    subject_possessive_pronoun: ChoiceField
    subject_noun_nominalizer: ChoiceField
    verb: ChoiceField
    verb_tense: ChoiceField
    object_pronoun: ChoiceField
    object_noun: ChoiceField
    object_noun_nominalizer: ChoiceField
    object_suffix: ChoiceField
    object_possessive_pronoun: ChoiceField

    def items(self) -> Iterator[Tuple[str, ChoiceField]]:
        for name in CHOICE_ORDER:
            yield name, getattr(self, name)

    def selection(self) -> Selection:
        return Selection(**{name: field.value for name, field in self.items()})

    def missing_required(self) -> List[str]:
        return [name for name, field in self.items() if field.is_missing]

    @property
    def is_complete(self) -> bool:
        return not self.missing_required()

class FormattedChoice(BaseModel):
    """A ChoiceField with its candidates as (key, label) pairs sorted by label."""
    choices: List[Tuple[str, str]]
    value: Optional[str] = None
    requirement: Requirement

# --- Assembled Sentences ---

class MorphemePart(BaseModel):
    role: PartRole
    text: str
    gloss: Optional[str] = None

class Phrase(BaseModel):
    role: PhraseRole
    text: str
    parts: List[MorphemePart] = Field(default_factory=list)

class Assembled(BaseModel):
    status: Literal["assembled"] = "assembled"
    phrases: List[Phrase]

    @property
    def text(self) -> str:
        return " ".join(p.text for p in self.phrases)

    def unwrap(self) -> List[Phrase]:
        return self.phrases

class Incomplete(BaseModel):
    status: Literal["incomplete"] = "incomplete"
    reason: str

    def unwrap(self) -> List[Phrase]:
        raise AssemblyError(self.reason)

AssemblyResult = Union[Assembled, Incomplete]

# --- Use Case Results ---

class BuilderState(BaseModel):
    """What the sentence builder shows: formatted choices plus the sentence so far."""
    choices: Dict[str, FormattedChoice]
    sentence: List[Phrase] = Field(default_factory=list)

class TranslationResult(BaseModel):
    """Outcome of the English -> Paiute pipeline."""
    english: str    # back-translation of the Paiute output
    paiute: str
    message: str = ""
    warning: str = ""
