"""OwnerRegistry — неизменяемый набор владельцев.

Набор фиксируется при конструировании и больше не меняется:
- O(1) membership через frozenset нормализованных идентификаторов
- порядок реестра сохраняется для отчётов (owners, approvers)
"""

import logging
from typing import Iterable, Iterator, Optional, Tuple

from src.core.domain.identifiers import is_identifier, is_zero_identifier, normalize_identifier
from src.multisig.guards import Guard00Configuration, raise_if_blocked


logger = logging.getLogger(__name__)


class OwnerRegistry:
    """Реестр владельцев (immutable после __init__)."""

    __slots__ = ("_owners", "_members")

    def __init__(self, owners: Iterable[str]):
        """
        Args:
            owners: идентификаторы владельцев

        Raises:
            InvalidConfiguration: пустой список, дубликат или нулевой идентификатор
        """
        owner_list = list(owners) if owners is not None else []
        raise_if_blocked(Guard00Configuration().evaluate_owners(owner_list))

        self._owners: Tuple[str, ...] = tuple(normalize_identifier(o) for o in owner_list)
        self._members = frozenset(self._owners)
        logger.info("owner registry created: %d owners", len(self._owners))

    def is_owner(self, identifier: Optional[str]) -> bool:
        if not is_identifier(identifier) or is_zero_identifier(identifier):
            return False
        return normalize_identifier(identifier) in self._members

    @property
    def owners(self) -> Tuple[str, ...]:
        return self._owners

    @property
    def owner_count(self) -> int:
        return len(self._owners)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.is_owner(identifier)

    def __iter__(self) -> Iterator[str]:
        return iter(self._owners)

    def __len__(self) -> int:
        return len(self._owners)

    def __repr__(self) -> str:
        return f"OwnerRegistry(owners={list(self._owners)!r})"
