"""BaseMatcher and the boolean-algebra combinator layer.

BaseMatcher supplies what every concrete matcher shares:
- listener notification around each evaluation (see diffmatch._events)
- the binary combinators and_, or_, xor, nand, nor, xnor, negate
  (also spelled &, |, ^, ~)
- descriptions (describe_to, describe_mismatch, str())

Combinator nodes own an ordered tuple of children and evaluate as a left
fold: And((a, b, c)) is (a and b) and c. and/or/nand/nor short-circuit the
same way their binary forms do. No node keeps state between calls.

The n-ary forms (and_all, or_all, ...) validate their arguments before any
evaluation and return a single remaining matcher unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Self

from diffmatch._description import MatchDescription
from diffmatch._errors import EventDispatchError, InvalidParameterError, MatcherError
from diffmatch._events import MatcherEventType, MatcherHandler
from diffmatch._types import MatcherMode, mode_of

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from diffmatch._types import MatcherEventListener

MAX_DEPTH = 32


@dataclass(frozen=True, slots=True)
class BaseMatcher:
    """Shared behaviour of all concrete matchers.

    Subclasses are frozen dataclasses implementing _matches(). The mode and
    handler fields are keyword-only so subclasses can declare positional
    fields freely. The handler is excluded from equality: two matchers with
    the same configuration are equal whoever listens to them.
    """

    mode: MatcherMode = field(default=MatcherMode.STRICT, kw_only=True)
    handler: MatcherHandler = field(
        default_factory=MatcherHandler, compare=False, repr=False, kw_only=True
    )

    @property
    def arity(self) -> int:
        """Number of values matches() takes: 1 for matchers, 2 for bi matchers."""
        return 1

    def matches(self, *values: Any) -> bool:
        handler = self.handler
        if not handler.has_listeners or not self.mode.is_enabled:
            return self._matches(*values)

        subject = values[0] if len(values) == 1 else values
        handler.dispatch(self, subject, MatcherEventType.START)
        try:
            handler.dispatch(self, subject, MatcherEventType.BEFORE)
            try:
                result = self._matches(*values)
            except Exception as error:
                _dispatch_on_error(handler, self, subject, MatcherEventType.ERROR, error)
                raise
            handler.dispatch(self, subject, MatcherEventType.from_result(result))
            handler.dispatch(self, subject, MatcherEventType.AFTER)
        except BaseException as error:
            _dispatch_on_error(handler, self, subject, MatcherEventType.COMPLETE, error)
            raise
        handler.dispatch(self, subject, MatcherEventType.COMPLETE)
        return result

    def _matches(self, *values: Any) -> bool:
        raise NotImplementedError

    # ── Listeners ─────────────────────────────────────────────────────────

    def add_listener(self, listener: MatcherEventListener) -> Self:
        """Register a listener on this matcher's handler."""
        self.handler.add_listener(listener)
        return self

    # ── Descriptions ──────────────────────────────────────────────────────

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text(type(self).__name__)

    def describe_mismatch(self, value: Any, description: MatchDescription) -> None:
        description.append_text("was ").append_value(value)

    def describe(self) -> MatchDescription:
        return MatchDescription.of(self)

    def __str__(self) -> str:
        return str(self.describe())

    # ── Combinators ───────────────────────────────────────────────────────

    def negate(self) -> BaseMatcher:
        return Not(self)

    def and_(self, other: Any) -> BaseMatcher:
        return And(_operands(self, other, And.symbol))

    def or_(self, other: Any) -> BaseMatcher:
        return Or(_operands(self, other, Or.symbol))

    def xor(self, other: Any) -> BaseMatcher:
        return Xor(_operands(self, other, Xor.symbol))

    def nand(self, other: Any) -> BaseMatcher:
        return Nand(_operands(self, other, Nand.symbol))

    def nor(self, other: Any) -> BaseMatcher:
        return Nor(_operands(self, other, Nor.symbol))

    def xnor(self, other: Any) -> BaseMatcher:
        return Xnor(_operands(self, other, Xnor.symbol))

    def __invert__(self) -> BaseMatcher:
        return self.negate()

    def __and__(self, other: Any) -> BaseMatcher:
        return self.and_(other)

    def __or__(self, other: Any) -> BaseMatcher:
        return self.or_(other)

    def __xor__(self, other: Any) -> BaseMatcher:
        return self.xor(other)

    # ── Bulk evaluation ───────────────────────────────────────────────────

    def all_match(self, values: Iterable[Any] | None) -> bool:
        """True if every value matches. Bi matchers take (first, last) pairs."""
        return all(self._apply(v) for v in values or ())

    def any_match(self, values: Iterable[Any] | None) -> bool:
        return any(self._apply(v) for v in values or ())

    def none_match(self, values: Iterable[Any] | None) -> bool:
        return not self.any_match(values)

    def _apply(self, item: Any) -> bool:
        if self.arity == 1:
            return self.matches(item)
        return self.matches(*item)


@dataclass(frozen=True, slots=True)
class BaseBiMatcher(BaseMatcher):
    """Base for pairwise matchers: matches(first, last)."""

    @property
    def arity(self) -> int:
        return 2


# ═══════════════════════════════════════════════════════════════════════════════
# Combinator nodes
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Not(BaseMatcher):
    """Logical complement of the inner matcher."""

    matcher: Any

    def __post_init__(self) -> None:
        _check_operands((self.matcher,), "not")

    @property
    def arity(self) -> int:
        return arity_of(self.matcher)

    def _matches(self, *values: Any) -> bool:
        return not self.matcher.matches(*values)

    def negate(self) -> Any:
        # Double negation is the identity.
        return self.matcher

    def describe_to(self, description: MatchDescription) -> None:
        description.append_text("not ").append_description_of(self.matcher)


@dataclass(frozen=True, slots=True)
class _Compound(BaseMatcher):
    """Left fold of a boolean operator over an ordered tuple of matchers."""

    matchers: tuple[Any, ...]

    symbol: ClassVar[str] = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "matchers", tuple(self.matchers))
        _check_operands(self.matchers, self.symbol)

    @property
    def arity(self) -> int:
        return arity_of(self.matchers[0])

    @staticmethod
    def _step(acc: bool, rhs: Callable[[], bool]) -> bool:
        raise NotImplementedError

    def _matches(self, *values: Any) -> bool:
        first, *rest = self.matchers
        result = bool(first.matches(*values))
        for m in rest:
            result = self._step(result, lambda m=m: bool(m.matches(*values)))
        return result

    def describe_to(self, description: MatchDescription) -> None:
        first, *rest = self.matchers
        description.append_text("(" * len(rest)).append_description_of(first)
        for m in rest:
            description.append_text(f" {self.symbol} ")
            description.append_description_of(m).append_text(")")


@dataclass(frozen=True, slots=True)
class And(_Compound):
    symbol: ClassVar[str] = "and"

    @staticmethod
    def _step(acc: bool, rhs: Callable[[], bool]) -> bool:
        return acc and rhs()


@dataclass(frozen=True, slots=True)
class Or(_Compound):
    symbol: ClassVar[str] = "or"

    @staticmethod
    def _step(acc: bool, rhs: Callable[[], bool]) -> bool:
        return acc or rhs()


@dataclass(frozen=True, slots=True)
class Xor(_Compound):
    symbol: ClassVar[str] = "xor"

    @staticmethod
    def _step(acc: bool, rhs: Callable[[], bool]) -> bool:
        return acc != rhs()


@dataclass(frozen=True, slots=True)
class Nand(_Compound):
    symbol: ClassVar[str] = "nand"

    @staticmethod
    def _step(acc: bool, rhs: Callable[[], bool]) -> bool:
        return not (acc and rhs())


@dataclass(frozen=True, slots=True)
class Nor(_Compound):
    symbol: ClassVar[str] = "nor"

    @staticmethod
    def _step(acc: bool, rhs: Callable[[], bool]) -> bool:
        return not (acc or rhs())


@dataclass(frozen=True, slots=True)
class Xnor(_Compound):
    symbol: ClassVar[str] = "xnor"

    @staticmethod
    def _step(acc: bool, rhs: Callable[[], bool]) -> bool:
        return acc == rhs()


COMPOUND_TYPES: dict[str, type[_Compound]] = {
    node.symbol: node for node in (And, Or, Xor, Nand, Nor, Xnor)
}


# ═══════════════════════════════════════════════════════════════════════════════
# N-ary forms
# ═══════════════════════════════════════════════════════════════════════════════


def and_all(*matchers: Any) -> Any:
    """Fold matchers with logical AND.

    Accepts matchers as positional arguments or as a single list/tuple.

    Raises:
        InvalidParameterError: no matchers, a None matcher, mixed arities,
            or every matcher SILENT.
    """
    return combine(And, matchers)


def or_all(*matchers: Any) -> Any:
    """Fold matchers with logical OR. See and_all for validation rules."""
    return combine(Or, matchers)


def xor_all(*matchers: Any) -> Any:
    """Fold matchers with logical XOR (true for an odd number of matches)."""
    return combine(Xor, matchers)


def nand_all(*matchers: Any) -> Any:
    """Left-fold matchers with NAND: nand_all(a, b, c) is (a nand b) nand c."""
    return combine(Nand, matchers)


def nor_all(*matchers: Any) -> Any:
    """Left-fold matchers with NOR: nor_all(a, b, c) is (a nor b) nor c."""
    return combine(Nor, matchers)


def xnor_all(*matchers: Any) -> Any:
    """Left-fold matchers with XNOR: xnor_all(a, b, c) is (a xnor b) xnor c."""
    return combine(Xnor, matchers)


def combine(node: type[_Compound], matchers: Iterable[Any]) -> Any:
    """Validate and fold matchers into a node of the given type.

    SILENT matchers are dropped after validation. A single remaining matcher
    is returned as-is (a fold over one element is that element).
    """
    items = tuple(matchers)
    if len(items) == 1 and isinstance(items[0], (list, tuple)):
        items = tuple(items[0])
    _check_operands(items, node.symbol)

    enabled = tuple(m for m in items if mode_of(m).is_enabled)
    if not enabled:
        msg = f"unable to combine matchers via logical {node.symbol.upper()}: every matcher is silent"
        raise InvalidParameterError(msg)
    if len(enabled) == 1:
        return enabled[0]
    return node(enabled)


# ═══════════════════════════════════════════════════════════════════════════════
# Tree helpers
# ═══════════════════════════════════════════════════════════════════════════════


def arity_of(matcher: Any) -> int:
    """Arity of any matcher; protocol-only matchers are assumed unary."""
    return getattr(matcher, "arity", 1)


def matcher_depth(matcher: Any) -> int:
    """Calculate the nesting depth of a matcher tree.

    Wrapping matchers (type-safe, field, caching, collection) expose the
    wrapped matcher as `.matcher` and count as one level.
    """
    match matcher:
        case _Compound(matchers=children):
            return 1 + max(matcher_depth(child) for child in children)
        case _:
            inner = getattr(matcher, "matcher", None)
            if inner is None:
                return 1
            return 1 + matcher_depth(inner)


def validate_depth(matcher: Any) -> int:
    """Return the depth of a matcher tree, rejecting trees over MAX_DEPTH.

    Raises:
        MatcherError: If depth exceeds MAX_DEPTH.
    """
    depth = matcher_depth(matcher)
    if depth > MAX_DEPTH:
        msg = f"matcher depth {depth} exceeds maximum allowed depth {MAX_DEPTH}"
        raise MatcherError(msg)
    return depth


def _dispatch_on_error(
    handler: MatcherHandler,
    matcher: BaseMatcher,
    subject: Any,
    event_type: MatcherEventType,
    error: BaseException,
) -> None:
    """Dispatch while error is in flight; a listener failure is chained onto error."""
    try:
        handler.dispatch(matcher, subject, event_type)
    except EventDispatchError as dispatch_error:
        error.add_note(str(dispatch_error))
        if error.__cause__ is None:
            error.__cause__ = dispatch_error


def _operands(this: Any, other: Any, symbol: str) -> tuple[Any, Any]:
    if other is None:
        msg = f"matcher should not be None (logical {symbol.upper()})"
        raise InvalidParameterError(msg)
    return (this, other)


def _check_operands(matchers: tuple[Any, ...], symbol: str) -> None:
    op = symbol.upper()
    if not matchers:
        msg = f"unable to combine matchers via logical {op}: no matchers given"
        raise InvalidParameterError(msg)
    for i, m in enumerate(matchers):
        if m is None:
            msg = f"unable to combine matchers via logical {op}: matcher at position {i} is None"
            raise InvalidParameterError(msg)
        if not callable(getattr(m, "matches", None)):
            msg = f"unable to combine matchers via logical {op}: {m!r} is not a matcher"
            raise InvalidParameterError(msg)
    arities = {arity_of(m) for m in matchers}
    if len(arities) > 1:
        msg = f"unable to combine matchers via logical {op}: mixed arities {sorted(arities)}"
        raise InvalidParameterError(msg)
