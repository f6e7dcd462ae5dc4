"""Type registry for config-driven matcher construction.

The registry turns JSON/YAML config into runtime matchers without
domain-specific compile code:

- RegistryBuilder → .build() → Registry (immutable)
- Factories are plain callables: (config: dict) → DataInput or Matcher
- load_matcher() walks a predicate config tree and constructs matchers
- load_diff_matcher() builds a DiffMatcher from a DiffMatcherConfig

Example::

    builder = register_core_inputs(RegistryBuilder())
    builder.matcher("acme.v1.Positive", lambda cfg: matcher(lambda v: v > 0, "positive"))
    registry = builder.build()

    config = parse_diff_matcher_config(yaml.safe_load(text))
    diff = registry.load_diff_matcher(config)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

from diffmatch._config import (
    BuiltInMatch,
    CompoundPredicateConfig,
    CustomMatch,
    NotPredicateConfig,
    SinglePredicateConfig,
)
from diffmatch._core_matchers import EqualMatcher, FieldMatcher, InMatcher, NoneMatcher
from diffmatch._diff import DiffMatcher
from diffmatch._errors import MatcherError
from diffmatch._inputs import AttributeInput, KeyInput
from diffmatch._matcher import COMPOUND_TYPES, Not, combine, validate_depth
from diffmatch._string_matchers import (
    ContainsMatcher,
    ExactMatcher,
    PrefixMatcher,
    RegexMatcher,
    SuffixMatcher,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from diffmatch._config import DiffMatcherConfig, PredicateConfig, ValueMatchConfig
    from diffmatch._events import MatcherHandler
    from diffmatch._types import DataInput, Matcher

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_MATCHERS = 256
MAX_PREDICATES_PER_COMPOUND = 256
MAX_PATTERN_LENGTH = 8192
MAX_REGEX_PATTERN_LENGTH = 4096

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownTypeUrlError(MatcherError):
    """A type_url was not found in the registry."""

    def __init__(self, type_url: str, registry: str, available: list[str]) -> None:
        self.type_url = type_url
        self.registry = registry
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown {registry} type_url: {type_url!r} (registered: {registered})"
        else:
            msg = f"unknown {registry} type_url: {type_url!r} (no {registry} types are registered)"
        super().__init__(msg)


class InvalidConfigError(MatcherError):
    """A config payload was malformed or semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class TooManyMatchersError(MatcherError):
    """Config registers too many matchers in one DiffMatcher."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many matchers: {count} exceeds maximum {max_}")


class TooManyPredicatesError(MatcherError):
    """Compound predicate has too many children."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many predicates in compound: {count} exceeds maximum {max_}")


class PatternTooLongError(MatcherError):
    """A match pattern exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

InputFactory: TypeAlias = "Callable[[dict[str, Any]], DataInput[Any]]"
MatcherFactory: TypeAlias = "Callable[[dict[str, Any]], Matcher[Any]]"


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register DataInput and Matcher factories with type URLs, then call
    build() to produce an immutable Registry. Registering a type URL twice
    keeps the last factory.
    """

    def __init__(self) -> None:
        self._input_factories: dict[str, InputFactory] = {}
        self._matcher_factories: dict[str, MatcherFactory] = {}

    def input(self, type_url: str, factory: InputFactory) -> RegistryBuilder:
        """Register a DataInput factory with a type URL."""
        self._input_factories[type_url] = factory
        return self

    def matcher(self, type_url: str, factory: MatcherFactory) -> RegistryBuilder:
        """Register a Matcher factory with a type URL."""
        self._matcher_factories[type_url] = factory
        return self

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        return Registry(
            _input_factories=MappingProxyType(dict(self._input_factories)),
            _matcher_factories=MappingProxyType(dict(self._matcher_factories)),
        )


def _attribute_input(cfg: dict[str, Any]) -> AttributeInput:
    name = cfg.get("name")
    if not isinstance(name, str) or not name:
        msg = f"AttributeInput requires a non-empty string 'name', got {name!r}"
        raise ValueError(msg)
    return AttributeInput(name)


def _key_input(cfg: dict[str, Any]) -> KeyInput:
    if "key" not in cfg:
        msg = "KeyInput requires 'key'"
        raise ValueError(msg)
    return KeyInput(cfg["key"])


def _one_of(cfg: dict[str, Any]) -> InMatcher:
    values = cfg.get("values")
    if not isinstance(values, list):
        msg = f"OneOf requires a 'values' list, got {values!r}"
        raise ValueError(msg)
    return InMatcher(tuple(values))


def register_core_inputs(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the attribute and mapping-key inputs.

    - diffmatch.input.v1.AttributeInput  {name: str}
    - diffmatch.input.v1.KeyInput        {key: any}
    """
    builder.input("diffmatch.input.v1.AttributeInput", _attribute_input)
    builder.input("diffmatch.input.v1.KeyInput", _key_input)
    return builder


def register_core_matchers(builder: RegistryBuilder) -> RegistryBuilder:
    """Register value matchers usable as custom_match.

    - diffmatch.matcher.v1.IsNone   {}
    - diffmatch.matcher.v1.NotNone  {}
    - diffmatch.matcher.v1.OneOf    {values: [...]}
    """
    builder.matcher("diffmatch.matcher.v1.IsNone", lambda cfg: NoneMatcher())
    builder.matcher("diffmatch.matcher.v1.NotNone", lambda cfg: Not(NoneMatcher()))
    builder.matcher("diffmatch.matcher.v1.OneOf", _one_of)
    return builder


def default_registry() -> Registry:
    """Registry with the core inputs and matchers registered."""
    return register_core_matchers(register_core_inputs(RegistryBuilder())).build()


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable registry of DataInput and Matcher factories.

    Constructed via RegistryBuilder. Registries are explicit values: pass
    the one you need to whatever loads config.
    """

    _input_factories: MappingProxyType[str, InputFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )
    _matcher_factories: MappingProxyType[str, MatcherFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_matcher(self, config: PredicateConfig) -> Any:
        """Load one matcher from a predicate config.

        Raises:
            UnknownTypeUrlError: input or matcher type_url not registered
            InvalidConfigError: config payload malformed
            TooManyPredicatesError: too many compound predicate children
            PatternTooLongError: pattern exceeds length limit
            MatcherError: depth exceeded
        """
        loaded = self._load_predicate(config)
        validate_depth(loaded)
        return loaded

    def load_diff_matcher(
        self, config: DiffMatcherConfig, handler: MatcherHandler | None = None
    ) -> DiffMatcher:
        """Load a DiffMatcher from configuration, preserving matcher order.

        Raises:
            TooManyMatchersError: too many top-level matchers
            plus everything load_matcher() raises
        """
        if len(config.matchers) > MAX_MATCHERS:
            raise TooManyMatchersError(len(config.matchers), MAX_MATCHERS)

        matchers = [self.load_matcher(p) for p in config.matchers]
        logger.debug("loaded diff matcher with %d matchers", len(matchers))
        return DiffMatcher(matchers, handler=handler)

    @property
    def input_count(self) -> int:
        """Number of registered input types."""
        return len(self._input_factories)

    @property
    def matcher_count(self) -> int:
        """Number of registered matcher types."""
        return len(self._matcher_factories)

    def contains_input(self, type_url: str) -> bool:
        return type_url in self._input_factories

    def contains_matcher(self, type_url: str) -> bool:
        return type_url in self._matcher_factories

    def input_type_urls(self) -> list[str]:
        """Return all registered input type URLs (sorted)."""
        return sorted(self._input_factories.keys())

    def matcher_type_urls(self) -> list[str]:
        """Return all registered matcher type URLs (sorted)."""
        return sorted(self._matcher_factories.keys())

    # ── Private loading methods ────────────────────────────────────────────

    def _load_predicate(self, config: PredicateConfig) -> Any:
        match config:
            case SinglePredicateConfig():
                return self._load_single(config)
            case CompoundPredicateConfig(operator=op, predicates=children):
                if len(children) > MAX_PREDICATES_PER_COMPOUND:
                    raise TooManyPredicatesError(len(children), MAX_PREDICATES_PER_COMPOUND)
                node = COMPOUND_TYPES.get(op)
                if node is None:
                    msg = f"unknown compound operator: {op!r}"
                    raise InvalidConfigError(msg)
                return combine(node, [self._load_predicate(p) for p in children])
            case NotPredicateConfig(predicate=inner):
                return Not(self._load_predicate(inner))
            case _:  # pragma: no cover
                msg = f"unknown predicate config type: {type(config).__name__}"
                raise InvalidConfigError(msg)

    def _load_single(self, config: SinglePredicateConfig) -> FieldMatcher:
        factory = self._input_factories.get(config.input.type_url)
        if factory is None:
            raise UnknownTypeUrlError(
                config.input.type_url,
                "input",
                list(self._input_factories.keys()),
            )

        try:
            data_input = factory(config.input.config)
        except Exception as e:
            raise InvalidConfigError(str(e)) from e

        value_matcher = self._load_value_match(config.matcher)
        return FieldMatcher(data_input, value_matcher, config.name)

    def _load_value_match(self, config: ValueMatchConfig) -> Any:
        match config:
            case BuiltInMatch(variant=variant, value=value):
                return _compile_built_in(variant, value)
            case CustomMatch(typed_config=tc):
                factory = self._matcher_factories.get(tc.type_url)
                if factory is None:
                    raise UnknownTypeUrlError(
                        tc.type_url,
                        "matcher",
                        list(self._matcher_factories.keys()),
                    )
                try:
                    return factory(tc.config)
                except Exception as e:
                    raise InvalidConfigError(str(e)) from e
            case _:  # pragma: no cover
                msg = f"unknown value_match config type: {type(config).__name__}"
                raise InvalidConfigError(msg)


# ═══════════════════════════════════════════════════════════════════════════════
# Built-in matcher compilation
# ═══════════════════════════════════════════════════════════════════════════════


def _check_pattern_length(variant: str, value: Any) -> None:
    """Enforce pattern length limits on built-in string match specs."""
    if not isinstance(value, str):
        return
    if variant == "Regex":
        if len(value) > MAX_REGEX_PATTERN_LENGTH:
            raise PatternTooLongError(len(value), MAX_REGEX_PATTERN_LENGTH)
    elif len(value) > MAX_PATTERN_LENGTH:
        raise PatternTooLongError(len(value), MAX_PATTERN_LENGTH)


def _compile_built_in(variant: str, value: Any) -> Any:
    """Compile a built-in match variant into a matcher."""
    _check_pattern_length(variant, value)

    match variant:
        case "Exact":
            return ExactMatcher(value)
        case "Prefix":
            return PrefixMatcher(value)
        case "Suffix":
            return SuffixMatcher(value)
        case "Contains":
            return ContainsMatcher(value)
        case "Regex":
            try:
                return RegexMatcher(value)
            except MatcherError as e:
                msg = f"invalid regex pattern: {e}"
                raise InvalidConfigError(msg) from e
        case "Equal":
            return EqualMatcher(value)
        case _:
            msg = f"unknown built-in match variant: {variant!r}"
            raise InvalidConfigError(msg)
