"""GUARD 1: Owner access — вызывающий должен быть owner

Применяется к submit / approve / revoke. execute и deposit не
owner-gated и этот guard не вызывают.
"""

from typing import Optional, Protocol

from src.multisig.guards.result import GuardResult


GUARD_NAME = "guard_01_owner_access"


class OwnerMembership(Protocol):
    def is_owner(self, identifier: Optional[str]) -> bool: ...


class Guard01OwnerAccess:
    """GUARD 1: membership-проверка через OwnerRegistry."""

    def evaluate(self, registry: OwnerMembership, caller: Optional[str]) -> GuardResult:
        if not registry.is_owner(caller):
            return GuardResult.block(GUARD_NAME, "not_owner", f"not owner: {caller!r}")
        return GuardResult.allow(GUARD_NAME, f"owner={caller}")
