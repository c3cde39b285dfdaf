"""
Selector rules for main-content extraction.

Rules are plain data: a ``SelectorRule`` is a named conjunction of matchers
(tag, class or attribute), and a ``PrunePredicate`` is a set of rules where
any match removes the whole subtree. Rules can be written as a small subset
of CSS selector syntax and compiled with ``parse_selector``::

    article
    div.post-content
    .sidebar
    [hidden]
    div[itemprop="articleBody"]

Combinators (descendant, child, sibling), pseudo-classes and attribute
operators other than ``=`` are not supported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from bs4 import Tag

from ..exceptions import SelectorSyntaxError


def _class_tokens(node: Tag) -> List[str]:
    classes = node.get("class") or []
    if isinstance(classes, str):
        return classes.split()
    return list(classes)


@dataclass(frozen=True, slots=True)
class TagMatcher:
    """Matches elements by tag name."""

    name: str

    def matches(self, node: Tag) -> bool:
        return node.name == self.name


@dataclass(frozen=True, slots=True)
class ClassMatcher:
    """Matches elements carrying the given class token."""

    name: str

    def matches(self, node: Tag) -> bool:
        return self.name in _class_tokens(node)


@dataclass(frozen=True, slots=True)
class AttributeMatcher:
    """Matches elements by attribute presence, or exact value when ``value`` is set."""

    name: str
    value: str | None = None

    def matches(self, node: Tag) -> bool:
        if not node.has_attr(self.name):
            return False
        if self.value is None:
            return True
        actual = node.get(self.name)
        if isinstance(actual, list):
            # multi-valued attributes such as rel come back as lists
            actual = " ".join(actual)
        return actual == self.value


Matcher = Union[TagMatcher, ClassMatcher, AttributeMatcher]


@dataclass(frozen=True, slots=True)
class SelectorRule:
    """A named conjunction of matchers; an element matches when every matcher does."""

    name: str
    matchers: Tuple[Matcher, ...]

    def matches(self, node: Tag) -> bool:
        return all(matcher.matches(node) for matcher in self.matchers)

    def first_match(self, root: Tag) -> Tag | None:
        """Return the first matching descendant of ``root`` in document order."""
        return root.find(self.matches)


@dataclass(frozen=True, slots=True)
class PrunePredicate:
    """A set of rules identifying subtrees to remove."""

    rules: Tuple[SelectorRule, ...]

    def matches(self, node: Tag) -> bool:
        return any(rule.matches(node) for rule in self.rules)

    def prune(self, root: Tag) -> int:
        """Remove every matching subtree below ``root`` in place.

        Walks top-down and never descends into a removed subtree. Uses an
        explicit stack so very deep trees do not hit the recursion limit.

        Returns:
            Number of subtrees removed.
        """
        removed = 0
        stack = [root]
        while stack:
            node = stack.pop()
            for child in list(node.children):
                if not isinstance(child, Tag):
                    continue
                if self.matches(child):
                    child.decompose()
                    removed += 1
                else:
                    stack.append(child)
        return removed


_SELECTOR = re.compile(r"^(?P<tag>[a-zA-Z][\w-]*|\*)?(?P<rest>.*)$", re.DOTALL)
_PART = re.compile(
    r"""
    \.(?P<cls>[\w-]+)
    |
    \[\s*(?P<attr>[\w:-]+)\s*
        (?:=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\]\s"']+))\s*)?
    \]
    """,
    re.VERBOSE,
)


def parse_selector(selector: str) -> SelectorRule:
    """Compile a simple selector string into a ``SelectorRule``.

    Raises:
        SelectorSyntaxError: if the selector is empty or uses unsupported syntax.
    """
    text = selector.strip()
    if not text:
        raise SelectorSyntaxError("Empty selector")

    head = _SELECTOR.match(text)
    if head is None:
        raise SelectorSyntaxError(f"Unsupported selector syntax in {selector!r}")
    matchers: List[Matcher] = []
    tag = head.group("tag")
    if tag and tag != "*":
        matchers.append(TagMatcher(tag.lower()))

    rest = head.group("rest")
    pos = 0
    while pos < len(rest):
        part = _PART.match(rest, pos)
        if part is None:
            raise SelectorSyntaxError(f"Unsupported selector syntax in {selector!r} at {rest[pos:]!r}")
        if part.group("cls"):
            matchers.append(ClassMatcher(part.group("cls")))
        else:
            value = next((v for v in part.group("dq", "sq", "bare") if v is not None), None)
            matchers.append(AttributeMatcher(part.group("attr").lower(), value))
        pos = part.end()

    if not matchers and tag != "*":
        raise SelectorSyntaxError(f"Selector matches nothing: {selector!r}")
    return SelectorRule(name=text, matchers=tuple(matchers))


def compile_selectors(selectors: Iterable[str]) -> Tuple[SelectorRule, ...]:
    return tuple(parse_selector(selector) for selector in selectors)
