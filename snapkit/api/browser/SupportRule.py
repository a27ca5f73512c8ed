"""Ordered predicate table for format support."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .BrowserInfo import BrowserInfo


@dataclass(frozen=True)
class SupportRule:
    """One row of a support table.

    applies selects the browsers the row speaks for; supported gives the verdict.
    """

    applies: Callable[[BrowserInfo], bool]
    supported: Callable[[BrowserInfo], bool]
    reason: str = ""

    @staticmethod
    def evaluate(rules: Sequence["SupportRule"], info: BrowserInfo) -> bool:
        """Return the verdict of the first applicable rule (False when none apply)."""
        for rule in rules:
            if rule.applies(info):
                return rule.supported(info)
        return False

    @staticmethod
    def family(name: str) -> Callable[[BrowserInfo], bool]:
        """Predicate matching one browser family."""
        return lambda info: info.name == name

    @staticmethod
    def min_version(version: int) -> Callable[[BrowserInfo], bool]:
        """Predicate requiring a minimum major version."""
        return lambda info: info.version >= version
