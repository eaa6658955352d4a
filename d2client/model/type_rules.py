"""
Type-specific validators: extra predicates per type tag.

The default set is read from ``type_rules.yml`` next to this file and cached.
A registry is immutable; ``with_validator`` returns an extended copy.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping

import yaml

from d2client.model.types import TypeTag

_RULES_PATH = Path(__file__).resolve().parent / "type_rules.yml"

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class TypeSpecificValidator:
    message: str
    predicate: Predicate


def pattern_predicate(pattern: str) -> Predicate:
    """Predicate that passes when the whole of ``str(value)`` matches *pattern*."""
    compiled = re.compile(pattern)

    def _matches(value: Any) -> bool:
        return compiled.fullmatch(str(value)) is not None

    return _matches


class TypeSpecificValidators:
    """Read-only mapping of TypeTag -> ordered validators."""

    def __init__(self, validators: Mapping[TypeTag, tuple[TypeSpecificValidator, ...]] | None = None):
        self._validators = MappingProxyType(dict(validators or {}))

    def for_type(self, tag: TypeTag | None) -> tuple[TypeSpecificValidator, ...]:
        if tag is None:
            return ()
        return self._validators.get(tag, ())

    def with_validator(self, tag: TypeTag, message: str, predicate: Predicate) -> TypeSpecificValidators:
        merged = dict(self._validators)
        merged[tag] = merged.get(tag, ()) + (TypeSpecificValidator(message, predicate),)
        return TypeSpecificValidators(merged)

    def tags(self) -> list[TypeTag]:
        return list(self._validators)


# ── Parsing ──────────────────────────────────────────────

def parse_type_rules(raw: dict[str, Any] | None) -> TypeSpecificValidators:
    """Build a registry from the YAML structure ``{TAG: [{message, pattern}]}``."""
    validators: dict[TypeTag, tuple[TypeSpecificValidator, ...]] = {}
    for tag_name, entries in (raw or {}).items():
        tag = TypeTag.parse(tag_name)
        if tag is None:
            raise ValueError(f"Unknown type tag '{tag_name}' in type rules.")
        validators[tag] = tuple(
            TypeSpecificValidator(entry["message"], pattern_predicate(entry["pattern"]))
            for entry in entries
        )
    return TypeSpecificValidators(validators)


def load_type_rules(path: Path | str | None = None) -> TypeSpecificValidators:
    rules_path = Path(path) if path else _RULES_PATH
    with open(rules_path, encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    return parse_type_rules(raw)


@lru_cache(maxsize=1)
def default_type_rules() -> TypeSpecificValidators:
    """The bundled rules, loaded once per process."""
    return load_type_rules()
