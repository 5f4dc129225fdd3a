"""Ordered (predicate, label) rules and the combinators that evaluate them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Mapping, Optional, TypeVar

S = TypeVar("S")
T = TypeVar("T")

Dependencies = Mapping[str, str]


@dataclass(frozen=True)
class Rule(Generic[S, T]):
    """Pairs a label with the predicate that selects it."""

    label: T
    predicate: Callable[[S], bool]

    def matches(self, subject: S) -> bool:
        return self.predicate(subject)


def first_match(
    rules: Iterable[Rule[S, T]], subject: S, default: Optional[T] = None
) -> Optional[T]:
    """Return the label of the first rule whose predicate holds."""
    for rule in rules:
        if rule.matches(subject):
            return rule.label
    return default


def all_matches(rules: Iterable[Rule[S, T]], subject: S) -> List[T]:
    """Return the labels of every matching rule, in rule order, without duplicates."""
    labels: List[T] = []
    for rule in rules:
        if rule.matches(subject) and rule.label not in labels:
            labels.append(rule.label)
    return labels


# Dependency predicates


def has_any(*names: str) -> Callable[[Dependencies], bool]:
    def _predicate(deps: Dependencies) -> bool:
        return any(name in deps for name in names)

    return _predicate


def has_all(*names: str) -> Callable[[Dependencies], bool]:
    def _predicate(deps: Dependencies) -> bool:
        return all(name in deps for name in names)

    return _predicate


def version_contains(name: str, *tokens: str) -> Callable[[Dependencies], bool]:
    def _predicate(deps: Dependencies) -> bool:
        version = deps.get(name)
        if version is None:
            return False
        return any(token in version for token in tokens)

    return _predicate


def dependency_rule(label: str, *names: str) -> Rule[Dependencies, str]:
    """Rule that fires when any of ``names`` is a dependency."""
    return Rule(label=label, predicate=has_any(*names))


__all__ = [
    "Dependencies",
    "Rule",
    "all_matches",
    "dependency_rule",
    "first_match",
    "has_all",
    "has_any",
    "version_contains",
]
