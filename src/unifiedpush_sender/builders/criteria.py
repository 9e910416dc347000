"""
Recipient-targeting filters.

Every filter accepts either a single iterable or the values as separate
arguments::

    criteria.aliases(["mike", "john"])
    criteria.aliases("mike", "john")

Setting a filter again replaces the previous value.
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from unifiedpush_sender.builders.base import AttributeBuilder
from unifiedpush_sender.models.keys import CriteriaKey


def _collect(values: tuple[Union[str, Iterable[str]], ...]) -> list[str]:
    """Flatten ``("a", "b")`` or ``(["a", "b"],)`` into ``["a", "b"]``."""
    if len(values) == 1 and not isinstance(values[0], str):
        return list(values[0])
    return list(values)  # type: ignore[arg-type]


class CriteriaBuilder(AttributeBuilder):

    def _set(self, key: str, value: Any) -> CriteriaBuilder:
        self._attributes[key] = value
        return self

    def aliases(self, *aliases: Union[str, Iterable[str]]) -> CriteriaBuilder:
        """Identifiers of individual recipients, like username or email address."""
        return self._set(CriteriaKey.ALIASES, _collect(aliases))

    def variants(self, *variants: Union[str, Iterable[str]]) -> CriteriaBuilder:
        """Only notify the given mobile variants of the push application."""
        return self._set(CriteriaKey.VARIANTS, _collect(variants))

    def categories(self, *categories: Union[str, Iterable[str]]) -> CriteriaBuilder:
        """Semantic tags; duplicates collapse and order is not kept."""
        return self._set(CriteriaKey.CATEGORIES, set(_collect(categories)))

    def device_type(self, *device_type: Union[str, Iterable[str]]) -> CriteriaBuilder:
        """Only notify users running one of these devices, i.e. ``"iPad", "iPhone"``."""
        return self._set(CriteriaKey.DEVICE_TYPE, _collect(device_type))
