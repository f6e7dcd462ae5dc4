"""Config types for declarative DiffMatcher construction.

Config-driven construction path:
  dict → parse_diff_matcher_config() → DiffMatcherConfig → Registry.load_diff_matcher() → DiffMatcher

Relationship to runtime types:

| Config type               | Runtime type                  |
|---------------------------|-------------------------------|
| DiffMatcherConfig         | DiffMatcher                   |
| SinglePredicateConfig     | FieldMatcher                  |
| CompoundPredicateConfig   | And / Or / Xor / Nand / ...   |
| NotPredicateConfig        | Not                           |
| ValueMatchConfig          | string or equality matcher    |
| TypedConfig               | DataInput / custom matcher    |
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

from diffmatch._errors import MatcherError

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class TypedConfig:
    """Reference to a registered type with its configuration.

    - type_url identifies the registered type (input or matcher)
    - config carries the type-specific configuration payload
    """

    type_url: str
    config: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class BuiltInMatch:
    """Built-in value matching.

    String variants: { "Exact": "hello" }, { "Prefix": "/api" }, { "Regex": "^foo" }.
    Equality against any scalar: { "Equal": 5 }.
    """

    variant: str
    value: str | int | float | bool


@dataclass(frozen=True, slots=True)
class CustomMatch:
    """Custom matcher resolved via the registry's matcher factories."""

    typed_config: TypedConfig


ValueMatchConfig: TypeAlias = BuiltInMatch | CustomMatch


@dataclass(frozen=True, slots=True)
class SinglePredicateConfig:
    """Input + value match. Exactly one of value_match or custom_match is set.

    name labels the extracted field in descriptions; it defaults to the
    input's own name.
    """

    input: TypedConfig
    matcher: ValueMatchConfig
    name: str = ""


@dataclass(frozen=True, slots=True)
class CompoundPredicateConfig:
    """Left fold of one boolean operator over child predicates."""

    operator: str
    predicates: tuple[PredicateConfig, ...]


@dataclass(frozen=True, slots=True)
class NotPredicateConfig:
    """Inverts the inner predicate (logical NOT)."""

    predicate: PredicateConfig


PredicateConfig: TypeAlias = SinglePredicateConfig | CompoundPredicateConfig | NotPredicateConfig


@dataclass(frozen=True, slots=True)
class DiffMatcherConfig:
    """Configuration for a DiffMatcher: an ordered list of predicates."""

    matchers: tuple[PredicateConfig, ...]


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════

_STRING_MATCH_VARIANTS = frozenset({"Exact", "Prefix", "Suffix", "Contains", "Regex"})
_SCALAR_MATCH_VARIANTS = frozenset({"Equal"})
COMPOUND_OPERATORS = frozenset({"and", "or", "xor", "nand", "nor", "xnor"})


class ConfigParseError(MatcherError):
    """Error parsing a config dict into config types."""


def parse_diff_matcher_config(data: dict[str, Any]) -> DiffMatcherConfig:
    """Parse a dict into a DiffMatcherConfig.

    This is the main entry point for config loading.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_matchers = data.get("matchers")
    if raw_matchers is None:
        msg = "missing required field 'matchers'"
        raise ConfigParseError(msg)
    if not isinstance(raw_matchers, list):
        msg = f"'matchers' must be a list, got {type(raw_matchers).__name__}"
        raise ConfigParseError(msg)

    return DiffMatcherConfig(matchers=tuple(parse_predicate_config(p) for p in raw_matchers))


def parse_predicate_config(data: dict[str, Any]) -> PredicateConfig:
    """Parse a predicate config dict.

    Uses the 'type' discriminant: single, not, or one of the compound
    operators (and, or, xor, nand, nor, xnor).
    """
    if not isinstance(data, dict):
        msg = f"predicate must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    pred_type = data.get("type")
    if pred_type is None:
        msg = "predicate missing required field 'type'"
        raise ConfigParseError(msg)

    if pred_type == "single":
        return _parse_single_predicate(data)
    if pred_type in COMPOUND_OPERATORS:
        children = data.get("predicates")
        if not isinstance(children, list) or not children:
            msg = f"{pred_type} predicate requires a non-empty 'predicates' list"
            raise ConfigParseError(msg)
        return CompoundPredicateConfig(
            operator=pred_type,
            predicates=tuple(parse_predicate_config(p) for p in children),
        )
    if pred_type == "not":
        if "predicate" not in data:
            msg = "not predicate missing required field 'predicate'"
            raise ConfigParseError(msg)
        return NotPredicateConfig(predicate=parse_predicate_config(data["predicate"]))

    msg = f"unknown predicate type: {pred_type!r}"
    raise ConfigParseError(msg)


def _parse_single_predicate(data: dict[str, Any]) -> SinglePredicateConfig:
    """Parse a single predicate config dict.

    Enforces oneof: exactly one of value_match or custom_match.
    """
    if "input" not in data:
        msg = "single predicate missing required field 'input'"
        raise ConfigParseError(msg)

    input_cfg = _parse_typed_config(data["input"])
    has_value_match = "value_match" in data
    has_custom_match = "custom_match" in data

    if has_value_match and has_custom_match:
        msg = "exactly one of 'value_match' or 'custom_match' must be set, got both"
        raise ConfigParseError(msg)
    if not has_value_match and not has_custom_match:
        msg = "one of 'value_match' or 'custom_match' is required"
        raise ConfigParseError(msg)

    matcher: ValueMatchConfig
    if has_value_match:
        matcher = _parse_value_match(data["value_match"])
    else:
        matcher = CustomMatch(typed_config=_parse_typed_config(data["custom_match"]))

    name = data.get("name", "")
    if not isinstance(name, str):
        msg = f"name must be a string, got {type(name).__name__}"
        raise ConfigParseError(msg)

    return SinglePredicateConfig(input=input_cfg, matcher=matcher, name=name)


def _parse_value_match(data: dict[str, Any]) -> BuiltInMatch:
    """Parse a value_match dict into a BuiltInMatch.

    Expected format: { "Exact": "hello" }, { "Equal": 5 } etc.
    """
    if not isinstance(data, dict):
        msg = f"value_match must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    for variant in sorted(_STRING_MATCH_VARIANTS):
        if variant in data:
            value = data[variant]
            if not isinstance(value, str):
                msg = f"value_match {variant} value must be a string, got {type(value).__name__}"
                raise ConfigParseError(msg)
            return BuiltInMatch(variant=variant, value=value)

    for variant in sorted(_SCALAR_MATCH_VARIANTS):
        if variant in data:
            value = data[variant]
            if not isinstance(value, (str, int, float, bool)):
                msg = f"value_match {variant} value must be a scalar, got {type(value).__name__}"
                raise ConfigParseError(msg)
            return BuiltInMatch(variant=variant, value=value)

    expected = sorted(_STRING_MATCH_VARIANTS | _SCALAR_MATCH_VARIANTS)
    msg = f"value_match must contain one of {expected}, got keys: {sorted(data.keys())}"
    raise ConfigParseError(msg)


def _parse_typed_config(data: dict[str, Any]) -> TypedConfig:
    """Parse a typed config dict."""
    if not isinstance(data, dict):
        msg = f"typed_config must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "type_url" not in data:
        msg = "typed_config missing required field 'type_url'"
        raise ConfigParseError(msg)

    type_url = data["type_url"]
    if not isinstance(type_url, str):
        msg = f"type_url must be a string, got {type(type_url).__name__}"
        raise ConfigParseError(msg)

    config = data.get("config", {})
    if not isinstance(config, dict):
        msg = f"config must be a dict, got {type(config).__name__}"
        raise ConfigParseError(msg)

    return TypedConfig(type_url=type_url, config=config)
