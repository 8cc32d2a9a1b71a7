"""Move permission check."""

from typing import AbstractSet

from movebot.domain.models import Identity


def roles_intersect(roles: AbstractSet[str], authorized_roles: AbstractSet[str]) -> bool:
    return not roles.isdisjoint(authorized_roles)


def is_authorized(identity: Identity, authorized_roles: AbstractSet[str]) -> bool:
    """Server owners always pass; everyone else needs one authorized role."""
    if identity.is_owner:
        return True
    return roles_intersect(identity.roles, authorized_roles)
