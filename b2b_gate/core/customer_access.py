"""Customer Access: activated customer groups and store membership.

Invariants:
    - The anonymous ("NOT LOGGED IN") group is always in the active group set
    - customer_allowed_in_store is False for anonymous sessions
    - Admin-created customers are valid in every store
    - Every function returns an explicit bool on every path
"""

from typing import Iterable

from b2b_gate.core.configuration import B2BConfiguration
from b2b_gate.core.domain_types import GroupId, ANONYMOUS_GROUP_CODE
from b2b_gate.core.repository_protocols import (
    SessionProvider, CustomerGroupRepository,
)


def active_customer_groups(
    configured: Iterable[GroupId], anonymous_group_id: GroupId,
) -> frozenset[GroupId]:
    return frozenset(configured) | {anonymous_group_id}


def resolve_active_customer_groups(
    configuration: B2BConfiguration, groups: CustomerGroupRepository,
) -> frozenset[GroupId]:
    """Configured groups plus the anonymous group looked up by its fixed code."""
    anonymous_group_id = groups.id_by_code(ANONYMOUS_GROUP_CODE)
    return active_customer_groups(
        configuration.activated_customer_group_ids, anonymous_group_id,
    )


def is_customer_group_active(
    session: SessionProvider, active_groups: frozenset[GroupId],
) -> bool:
    return session.current_customer_group_id() in active_groups


def customer_allowed_in_store(
    session: SessionProvider, configuration: B2BConfiguration,
) -> bool:
    """Is the visitor logged in and allowed on the current store?"""
    if not session.is_logged_in():
        return False
    if configuration.global_customer_activation:
        return True
    customer = session.current_customer()
    if customer.created_via_admin:
        return True
    return customer.store_id == session.current_store_id()
