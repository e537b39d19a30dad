#!/usr/bin/env python3
"""
OVP sentence builder developer CLI.

Usage:
    python -m ovp_builder.cli choices  --json '{"subject_noun": "pugu"}'
    python -m ovp_builder.cli assemble --json '{"subject_noun": "nüü", "verb": "poyoha", "verb_tense": "ti"}'
    python -m ovp_builder.cli random   --seed 7
    python -m ovp_builder.cli lexicon  nouns

Selections are JSON objects keyed by slot name; without --json they are
read from stdin. Output is JSON on stdout, logs go to stderr.
"""

import argparse
import json
import random
import sys
from typing import Any, Dict, List, Optional

from ovp_builder.core.domain.assembler import assemble
from ovp_builder.core.domain.choices import format_choices, resolve_choices
from ovp_builder.core.domain.lexicon import LEXICON
from ovp_builder.core.domain.models import Incomplete
from ovp_builder.core.use_cases.build_sentence import RandomSentence
from ovp_builder.shared.logging_config import configure_logging
from ovp_builder.shared.observability import setup_observability

LEXICON_TABLES = {
    "nouns": lambda: dict(LEXICON.nouns),
    "subject-pronouns": lambda: LEXICON.subject_pronoun_glosses,
    "object-pronouns": lambda: LEXICON.object_pronoun_glosses,
    "possessives": lambda: dict(LEXICON.possessive_pronouns),
    "transitive": lambda: dict(LEXICON.transitive_verbs),
    "intransitive": lambda: dict(LEXICON.intransitive_verbs),
    "tenses": lambda: dict(LEXICON.tenses),
    "nominalizers": lambda: dict(LEXICON.nominalizer_tenses),
}

def _read_selection(raw: Optional[str]) -> Dict[str, Any]:
    text = raw if raw is not None else sys.stdin.read()
    if not text.strip():
        return {}
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("selection must be a JSON object")
    return data

def _emit(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))

def cmd_choices(args) -> int:
    choices = resolve_choices(_read_selection(args.json))
    _emit({name: field.model_dump(mode="json") for name, field in format_choices(choices).items()})
    return 0

def cmd_assemble(args) -> int:
    result = assemble(_read_selection(args.json))
    if isinstance(result, Incomplete):
        print(f"Incomplete sentence: {result.reason}", file=sys.stderr)
        return 1
    _emit({"text": result.text, "phrases": [p.model_dump(mode="json") for p in result.phrases]})
    return 0

def cmd_random(args) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    partial = _read_selection(args.json) if args.json is not None else {}
    state = RandomSentence(rng=rng).execute(partial)
    _emit({
        "text": " ".join(p.text for p in state.sentence),
        "selection": {name: field.value for name, field in state.choices.items()},
    })
    return 0

def cmd_lexicon(args) -> int:
    _emit(LEXICON_TABLES[args.table]())
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ovp-builder", description="Owens Valley Paiute sentence builder")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("choices", help="Resolve the valid choices for a selection")
    p.add_argument("--json", help="Selection as a JSON object (default: stdin)")
    p.set_defaults(func=cmd_choices)

    p = sub.add_parser("assemble", help="Assemble a complete selection into a sentence")
    p.add_argument("--json", help="Selection as a JSON object (default: stdin)")
    p.set_defaults(func=cmd_assemble)

    p = sub.add_parser("random", help="Complete a selection with random legal values")
    p.add_argument("--json", help="Partial selection as a JSON object")
    p.add_argument("--seed", type=int, help="Seed for reproducible output")
    p.set_defaults(func=cmd_random)

    p = sub.add_parser("lexicon", help="Print a lexicon table")
    p.add_argument("table", choices=sorted(LEXICON_TABLES))
    p.set_defaults(func=cmd_lexicon)

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    setup_observability()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ValueError as e:
        # json.JSONDecodeError is a ValueError
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

if __name__ == "__main__":
    sys.exit(main())
