"""Pluralization rules for choice messages.

A choice message holds alternative forms separated by "|". Each form may be
prefixed by an explicit rule selecting it for some counts:

    {0} There is nobody online|{1} One user online|[2,Inf] :count users online

Two rule grammars are supported:

- exact sets, ``{1}`` or ``{0,1,5}``, matching any listed integer
- intervals, ``[a,b]`` with ``[``/``]`` inclusive and ``(``/``)`` exclusive
  bounds. ``Inf``, ``+Inf`` or ``-Inf`` as an endpoint leaves the interval
  unbounded on that side.

Anything else is not a rule; testing a count against it is always False.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple, Union

_EXACT_SET_RE = re.compile(r"^\{\s*(-?\d+(?:\s*,\s*-?\d+)*)\s*\}$")
_INTERVAL_RE = re.compile(
    r"^([\[(])\s*([+-]?Inf|[+-]?\d+)\s*,\s*([+-]?Inf|[+-]?\d+)\s*([\])])$"
)
_INF_TOKENS = ("Inf", "+Inf", "-Inf")


@dataclass(frozen=True)
class ExactSet:
    """Rule matching a finite set of integers, e.g. ``{0,1}``."""

    values: FrozenSet[int]

    def matches(self, count: Union[int, float]) -> bool:
        # Only whole counts can equal a listed integer literally
        if isinstance(count, bool) or not isinstance(count, int):
            return False
        return count in self.values


@dataclass(frozen=True)
class Interval:
    """Rule matching a range of counts, e.g. ``[2,Inf]`` or ``(0,10]``.

    Attributes:
        lower: Lower endpoint, None when unbounded.
        upper: Upper endpoint, None when unbounded.
        lower_inclusive: Whether the lower endpoint itself matches.
        upper_inclusive: Whether the upper endpoint itself matches.
    """

    lower: Optional[int]
    upper: Optional[int]
    lower_inclusive: bool = True
    upper_inclusive: bool = True

    def matches(self, count: Union[int, float]) -> bool:
        if self.lower is not None:
            if self.lower_inclusive and count < self.lower:
                return False
            if not self.lower_inclusive and count <= self.lower:
                return False
        if self.upper is not None:
            if self.upper_inclusive and count > self.upper:
                return False
            if not self.upper_inclusive and count >= self.upper:
                return False
        return True


Rule = Union[ExactSet, Interval]


def _parse_endpoint(token: str) -> Optional[int]:
    if token in _INF_TOKENS:
        return None
    return int(token)


def parse_rule(rule: str) -> Optional[Rule]:
    """Parse an explicit rule string.

    Args:
        rule: Rule text such as "{1}", "[2,Inf]" or "(0, 10]".

    Returns:
        ExactSet or Interval, or None if the text matches neither grammar.
    """
    if not isinstance(rule, str):
        return None
    rule = rule.strip()

    match = _EXACT_SET_RE.match(rule)
    if match:
        values = frozenset(int(part) for part in match.group(1).split(","))
        return ExactSet(values=values)

    match = _INTERVAL_RE.match(rule)
    if match:
        left, lower, upper, right = match.groups()
        return Interval(
            lower=_parse_endpoint(lower),
            upper=_parse_endpoint(upper),
            lower_inclusive=left == "[",
            upper_inclusive=right == "]",
        )

    return None


def matches_interval(count: Union[int, float], rule: str) -> bool:
    """Check whether a count is selected by an explicit rule string.

    Malformed rules never match.

    Args:
        count: Number of items.
        rule: Rule text, e.g. "{0}" or "[2,Inf]".

    Returns:
        True if the count satisfies the rule.
    """
    parsed = parse_rule(rule)
    if parsed is None:
        return False
    return parsed.matches(count)


def split_candidates(message: str) -> Tuple[List[str], List[Optional[str]]]:
    """Split a choice message into its candidate forms.

    Each form is trimmed. A form whose first whitespace-delimited token is a
    valid rule, followed by some text, has that token stripped and recorded
    as its rule; other forms get no rule.

    Args:
        message: Message with forms separated by "|".

    Returns:
        Tuple of (forms, rules) with rules aligned to forms by position.
    """
    forms: List[str] = []
    rules: List[Optional[str]] = []

    for part in message.split("|"):
        part = part.strip()
        prefix = part.split(None, 1)
        if len(prefix) == 2 and parse_rule(prefix[0]) is not None:
            rules.append(prefix[0])
            forms.append(prefix[1])
        else:
            rules.append(None)
            forms.append(part)

    return forms, rules
