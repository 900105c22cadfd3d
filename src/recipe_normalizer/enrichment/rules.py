# src/recipe_normalizer/enrichment/rules.py
from __future__ import annotations

"""
rules.py

Purpose:
    Small ordered rule-table used by every metadata cascade.

    A cascade is a tuple of rules tried front to back; the first rule that
    fires decides the value and nothing after it is evaluated. Keeping the
    tables as data means each rule can be tested on its own and precedence is
    visible in one place.
"""

import re
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PatternRule(Generic[T]):
    """Regex rule: fires when `pattern` is found, value comes from `extract`."""

    name: str
    pattern: re.Pattern
    extract: Callable[[re.Match], Optional[T]]

    def apply(self, text: str) -> Optional[re.Match]:
        return self.pattern.search(text)


@dataclass(frozen=True)
class CueRule(Generic[T]):
    """
    Keyword rule: fires when any keyword is a substring of the text.
    `resolve` receives the full text so a cue can still look for a number
    (e.g. "24 cookies").
    """

    name: str
    keywords: Sequence[str]
    resolve: Callable[[str], Optional[T]]

    def applies(self, text: str) -> bool:
        return contains_any(text, self.keywords)


def contains_any(text: str, keywords: Sequence[str]) -> bool:
    return any(k in text for k in keywords)


def constant(value: T) -> Callable[[str], T]:
    return lambda _text: value


def group(index: int = 1) -> Callable[[re.Match], str]:
    return lambda m: m.group(index)


def compile_rule(
    name: str,
    regex: str,
    extract: Callable[[re.Match], Optional[T]] | None = None,
) -> PatternRule[T]:
    return PatternRule(
        name=name,
        pattern=re.compile(regex, re.IGNORECASE),
        extract=extract or group(1),
    )


def first_match(rules: Sequence[PatternRule[T]], text: str) -> Optional[T]:
    """Return the value of the first rule whose pattern matches, else None."""
    for rule in rules:
        m = rule.apply(text)
        if m:
            return rule.extract(m)
    return None


def first_cue(rules: Sequence[CueRule[T]], text: str) -> Optional[T]:
    """
    Return the value of the first cue present in the text, else None.

    The first present cue decides even when it resolves to None; later cues
    are not consulted.
    """
    for rule in rules:
        if rule.applies(text):
            return rule.resolve(text)
    return None


def first_keyword(keywords: Sequence[str], text: str) -> Optional[str]:
    for kw in keywords:
        if kw in text:
            return kw
    return None


def all_keywords(keywords: Sequence[str], text: str) -> list[str]:
    return [kw for kw in keywords if kw in text]
