"""Domain service coordinating tenants and their memberships."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, TypeVar

from .tenant_entity import Tenant, new_tenant
from .tenant_events import (
    TenantMemberAddedEvent,
    TenantMemberRemovedEvent,
    TenantMemberRoleChangedEvent,
)
from .tenant_repository import TenantRepository
from .tenant_values import TenantID, TenantMember, TenantRole
from .user_repository import UserRepository
from .user_values import AggregateNotFoundError, BusinessError, UserID

R = TypeVar("R")

_MANAGER_ROLES = (TenantRole.OWNER, TenantRole.ADMIN)


def _rfc3339_now() -> str:
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    if stamp.endswith("+00:00"):
        stamp = stamp[: -len("+00:00")] + "Z"
    return stamp


def _find(lookup: Callable[..., R], *args: Any) -> R | None:
    """Call a repository lookup, turning 'not found' into None."""
    try:
        return lookup(*args)
    except LookupError:
        return None


class TenantService:
    """Business rules that span tenants, members and users."""

    def __init__(self, tenant_repo: TenantRepository, user_repo: UserRepository) -> None:
        self._tenants = tenant_repo
        self._users = user_repo

    def _load_tenant(self, tenant_id: TenantID) -> Tenant:
        tenant = _find(self._tenants.find_by_id, tenant_id)
        if tenant is None:
            raise AggregateNotFoundError()
        return tenant

    def _member(self, tenant_id: TenantID, user_id: UserID) -> TenantMember | None:
        return _find(self._tenants.find_member_by_user_id, tenant_id, user_id)

    def create_tenant(self, code: str, name: str, owner_id: UserID) -> Tenant:
        """Create a tenant and make its owner the first member."""
        if _find(self._tenants.find_by_code, code) is not None:
            raise BusinessError("TENANT_CODE_EXISTS", "tenant code already exists")
        if _find(self._users.find_by_id, owner_id) is None:
            raise BusinessError("OWNER_NOT_FOUND", "owner user not found")

        tenant = new_tenant(code, name, owner_id)
        self._tenants.save(tenant)

        member = TenantMember(
            user_id=owner_id,
            tenant_id=tenant.id,
            role=TenantRole.OWNER,
            joined_at=_rfc3339_now(),
        )
        self._tenants.add_member(tenant.id, member)
        return tenant

    def add_member(
        self, tenant_id: TenantID, user_id: UserID, added_by: UserID, role: TenantRole
    ) -> None:
        """Add a user to a tenant; only owners and admins may do so."""
        tenant = self._load_tenant(tenant_id)
        if not tenant.is_active():
            raise BusinessError("TENANT_NOT_ACTIVE", "tenant is not active")
        if _find(self._users.find_by_id, user_id) is None:
            raise BusinessError("USER_NOT_FOUND", "user not found")
        if self._member(tenant_id, user_id) is not None:
            raise BusinessError("ALREADY_MEMBER", "user is already a member of this tenant")

        members = self._tenants.find_members(tenant_id)
        if not tenant.can_add_member(len(members)):
            raise BusinessError("MAX_MEMBERS_REACHED", "tenant has reached maximum member limit")

        operator = self._member(tenant_id, added_by)
        if operator is None:
            raise BusinessError("OPERATOR_NOT_MEMBER", "operator is not a member of this tenant")
        if operator.role not in _MANAGER_ROLES:
            raise BusinessError(
                "INSUFFICIENT_PERMISSIONS", "insufficient permissions to add members"
            )

        member = TenantMember(
            user_id=user_id, tenant_id=tenant_id, role=role, joined_at=_rfc3339_now()
        )
        self._tenants.add_member(tenant_id, member)

        tenant.apply_event(
            TenantMemberAddedEvent(
                tenant_id=tenant_id, user_id=user_id, role=role, added_by=added_by
            )
        )
        self._tenants.save(tenant)

    def remove_member(self, tenant_id: TenantID, user_id: UserID, removed_by: UserID) -> None:
        """Remove a member; the owner cannot be removed and only the owner removes admins."""
        tenant = self._load_tenant(tenant_id)

        member = self._member(tenant_id, user_id)
        if member is None:
            raise BusinessError("NOT_MEMBER", "user is not a member of this tenant")
        operator = self._member(tenant_id, removed_by)
        if operator is None:
            raise BusinessError("OPERATOR_NOT_MEMBER", "operator is not a member of this tenant")

        if member.role is TenantRole.OWNER:
            raise BusinessError("CANNOT_REMOVE_OWNER", "cannot remove tenant owner")
        if operator.role not in _MANAGER_ROLES:
            raise BusinessError(
                "INSUFFICIENT_PERMISSIONS", "insufficient permissions to remove members"
            )
        if member.role is TenantRole.ADMIN and operator.role is not TenantRole.OWNER:
            raise BusinessError("CANNOT_REMOVE_ADMIN", "only owner can remove admin members")

        self._tenants.remove_member(tenant_id, user_id)

        tenant.apply_event(
            TenantMemberRemovedEvent(tenant_id=tenant_id, user_id=user_id, removed_by=removed_by)
        )
        self._tenants.save(tenant)

    def change_member_role(
        self, tenant_id: TenantID, user_id: UserID, changed_by: UserID, new_role: TenantRole
    ) -> None:
        """Change a member's role; only the owner may, and not on themselves."""
        tenant = self._load_tenant(tenant_id)

        member = self._member(tenant_id, user_id)
        if member is None:
            raise BusinessError("NOT_MEMBER", "user is not a member of this tenant")
        operator = self._member(tenant_id, changed_by)
        if operator is None:
            raise BusinessError("OPERATOR_NOT_MEMBER", "operator is not a member of this tenant")

        if operator.role is not TenantRole.OWNER:
            raise BusinessError("INSUFFICIENT_PERMISSIONS", "only owner can change member roles")
        if user_id.equals(changed_by):
            raise BusinessError("CANNOT_CHANGE_OWN_ROLE", "cannot change your own role")

        old_role = member.role
        member.role = new_role

        tenant.apply_event(
            TenantMemberRoleChangedEvent(
                tenant_id=tenant_id,
                user_id=user_id,
                changed_by=changed_by,
                old_role=old_role,
                new_role=new_role,
            )
        )
        self._tenants.save(tenant)

    def transfer_ownership(
        self, tenant_id: TenantID, new_owner_id: UserID, current_owner_id: UserID
    ) -> None:
        """Hand the tenant over to another of its members."""
        tenant = self._load_tenant(tenant_id)
        if not tenant.owner_id.equals(current_owner_id):
            raise BusinessError("NOT_OWNER", "only current owner can transfer ownership")

        new_owner = self._member(tenant_id, new_owner_id)
        if new_owner is None:
            raise BusinessError("NOT_MEMBER", "new owner must be a member of the tenant")

        tenant.transfer_to(new_owner_id)
        new_owner.role = TenantRole.OWNER
        self._tenants.save(tenant)

    def deactivate_tenant(self, tenant_id: TenantID, reason: str, operator_id: UserID) -> None:
        """Deactivate a tenant; only its owner may do so."""
        tenant = self._load_tenant(tenant_id)
        if not tenant.owner_id.equals(operator_id):
            raise BusinessError("INSUFFICIENT_PERMISSIONS", "only owner can deactivate tenant")
        tenant.deactivate(reason)