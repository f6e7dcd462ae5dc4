"""diffmatch: composable matchers and structural-difference reporting.

All public types are exported from this module for flat imports:

    from diffmatch import DiffMatcher, has_attribute, is_equal, and_all
"""

__version__ = "0.1.0"

from diffmatch._bi_matchers import (
    ComparatorBiMatcher,
    EqualBiMatcher,
    PredicateBiMatcher,
    SameKeyBiMatcher,
    SameTypeBiMatcher,
    TypeSafeBiMatcher,
    bi_matcher,
    compares_equal,
    equal_values,
    same_key,
    same_type,
    type_safe_bi,
)
from diffmatch._caching import CacheInfo, CachingMatcher, EvictingCachingMatcher, caching

# Config types: see diffmatch._config for details
from diffmatch._config import (
    BuiltInMatch,
    CompoundPredicateConfig,
    ConfigParseError,
    CustomMatch,
    DiffMatcherConfig,
    NotPredicateConfig,
    PredicateConfig,
    SinglePredicateConfig,
    TypedConfig,
    ValueMatchConfig,
    parse_diff_matcher_config,
    parse_predicate_config,
)
from diffmatch._core_matchers import (
    ConstantMatcher,
    EqualMatcher,
    EveryItemMatcher,
    FieldMatcher,
    HasItemMatcher,
    InMatcher,
    InstanceOfMatcher,
    NoneMatcher,
    PredicateMatcher,
    TypeSafeMatcher,
    anything,
    every_item,
    field_matcher,
    has_item,
    instance_of,
    is_equal,
    is_in,
    is_none,
    matcher,
    not_none,
    nothing,
    type_safe,
)
from diffmatch._description import EMPTY_DESCRIPTION, EmptyMatchDescription, MatchDescription
from diffmatch._diff import DiffMatchEntry, DiffMatcher
from diffmatch._errors import EventDispatchError, InvalidParameterError, MatcherError
from diffmatch._events import (
    BaseMatcherEventListener,
    CollectingMatcherEventListener,
    LoggingMatcherEventListener,
    MatcherEvent,
    MatcherEventType,
    MatcherHandler,
)
from diffmatch._filters import match_first_if, match_if, match_last_if, partition, remove_if
from diffmatch._inputs import AttributeInput, CallableInput, KeyInput, has_attribute, has_field, has_key

# Matcher base and combinators
from diffmatch._matcher import (
    MAX_DEPTH,
    And,
    BaseBiMatcher,
    BaseMatcher,
    Nand,
    Nor,
    Not,
    Or,
    Xnor,
    Xor,
    and_all,
    matcher_depth,
    nand_all,
    nor_all,
    or_all,
    validate_depth,
    xnor_all,
    xor_all,
)

# Registry: see diffmatch._registry for details
from diffmatch._registry import (
    MAX_MATCHERS,
    MAX_PATTERN_LENGTH,
    MAX_PREDICATES_PER_COMPOUND,
    MAX_REGEX_PATTERN_LENGTH,
    InvalidConfigError,
    PatternTooLongError,
    Registry,
    RegistryBuilder,
    TooManyMatchersError,
    TooManyPredicatesError,
    UnknownTypeUrlError,
    default_registry,
    register_core_inputs,
    register_core_matchers,
)
from diffmatch._string_matchers import (
    ContainsMatcher,
    ExactMatcher,
    PrefixMatcher,
    RegexMatcher,
    SuffixMatcher,
    contains_string,
    ends_with,
    equal_to_ignoring_case,
    matches_pattern,
    starts_with,
)
from diffmatch._types import BiMatcher, DataInput, Matcher, MatcherEventListener, MatcherMode

__all__ = [
    "EMPTY_DESCRIPTION",
    "MAX_DEPTH",
    "MAX_MATCHERS",
    "MAX_PATTERN_LENGTH",
    "MAX_PREDICATES_PER_COMPOUND",
    "MAX_REGEX_PATTERN_LENGTH",
    "And",
    "AttributeInput",
    "BaseBiMatcher",
    "BaseMatcher",
    "BaseMatcherEventListener",
    "BiMatcher",
    "BuiltInMatch",
    "CacheInfo",
    "CachingMatcher",
    "CallableInput",
    "CollectingMatcherEventListener",
    "ComparatorBiMatcher",
    "CompoundPredicateConfig",
    "ConfigParseError",
    "ConstantMatcher",
    "ContainsMatcher",
    "CustomMatch",
    "DataInput",
    "DiffMatchEntry",
    "DiffMatcher",
    "DiffMatcherConfig",
    "EmptyMatchDescription",
    "EqualBiMatcher",
    "EqualMatcher",
    "EventDispatchError",
    "EveryItemMatcher",
    "EvictingCachingMatcher",
    "ExactMatcher",
    "FieldMatcher",
    "HasItemMatcher",
    "InMatcher",
    "InstanceOfMatcher",
    "InvalidConfigError",
    "InvalidParameterError",
    "KeyInput",
    "LoggingMatcherEventListener",
    "MatchDescription",
    "Matcher",
    "MatcherError",
    "MatcherEvent",
    "MatcherEventListener",
    "MatcherEventType",
    "MatcherHandler",
    "MatcherMode",
    "Nand",
    "NoneMatcher",
    "Nor",
    "Not",
    "NotPredicateConfig",
    "Or",
    "PatternTooLongError",
    "PredicateBiMatcher",
    "PredicateConfig",
    "PredicateMatcher",
    "PrefixMatcher",
    "RegexMatcher",
    "Registry",
    "RegistryBuilder",
    "SameKeyBiMatcher",
    "SameTypeBiMatcher",
    "SinglePredicateConfig",
    "SuffixMatcher",
    "TooManyMatchersError",
    "TooManyPredicatesError",
    "TypeSafeBiMatcher",
    "TypeSafeMatcher",
    "TypedConfig",
    "UnknownTypeUrlError",
    "ValueMatchConfig",
    "Xnor",
    "Xor",
    "__version__",
    "and_all",
    "anything",
    "bi_matcher",
    "caching",
    "compares_equal",
    "contains_string",
    "default_registry",
    "ends_with",
    "equal_to_ignoring_case",
    "equal_values",
    "every_item",
    "field_matcher",
    "has_attribute",
    "has_field",
    "has_item",
    "has_key",
    "instance_of",
    "is_equal",
    "is_in",
    "is_none",
    "match_first_if",
    "match_if",
    "match_last_if",
    "matcher",
    "matcher_depth",
    "matches_pattern",
    "nand_all",
    "nor_all",
    "not_none",
    "nothing",
    "or_all",
    "parse_diff_matcher_config",
    "parse_predicate_config",
    "partition",
    "register_core_inputs",
    "register_core_matchers",
    "remove_if",
    "same_key",
    "same_type",
    "starts_with",
    "type_safe",
    "type_safe_bi",
    "validate_depth",
    "xnor_all",
    "xor_all",
]
