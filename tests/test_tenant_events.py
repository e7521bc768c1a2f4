from datetime import datetime

from dddscaffold.tenant_events import (
    TenantActivatedEvent,
    TenantConfigChangedEvent,
    TenantCreatedEvent,
    TenantDeactivatedEvent,
    TenantMemberAddedEvent,
    TenantMemberRemovedEvent,
    TenantMemberRoleChangedEvent,
    TenantNameChangedEvent,
    TenantSuspendedEvent,
)
from dddscaffold.tenant_values import TenantConfig, TenantID, TenantRole
from dddscaffold.user_values import UserID

TID = TenantID(1)
OWNER = UserID(10)


def test_created_event_fields_and_metadata():
    event = TenantCreatedEvent(tenant_id=TID, code="acme", name="Acme", owner_id=OWNER)
    assert event.event_name == "TenantCreated"
    assert event.aggregate_id == TID
    assert event.code == "acme"
    assert event.owner_id == OWNER
    assert event.event_version == 1
    assert event.metadata == {"event_type": "domain_event", "aggregate_type": "tenant"}
    assert isinstance(event.created_at, datetime)


def test_tenant_events_are_not_security_events():
    events = [
        TenantActivatedEvent(tenant_id=TID),
        TenantDeactivatedEvent(tenant_id=TID, reason="r"),
        TenantSuspendedEvent(tenant_id=TID, reason="r"),
    ]
    assert all("security_event" not in e.metadata for e in events)
    assert [e.event_name for e in events] == [
        "TenantActivated",
        "TenantDeactivated",
        "TenantSuspended",
    ]


def test_name_changed_event():
    event = TenantNameChangedEvent(tenant_id=TID, old_name="Old", new_name="New")
    assert (event.old_name, event.new_name) == ("Old", "New")
    assert event.event_name == "TenantNameChanged"


def test_config_changed_holds_any_value():
    config = TenantConfig()
    event = TenantConfigChangedEvent(tenant_id=TID, config_key="config", config_value=config)
    assert event.config_value is config
    assert event.config_key == "config"


def test_member_added_role_is_named():
    event = TenantMemberAddedEvent(
        tenant_id=TID, user_id=UserID(2), role=TenantRole.ADMIN, added_by=OWNER
    )
    assert event.role == "admin"
    assert event.added_by == OWNER
    assert event.metadata["aggregate_type"] == "tenant"


def test_member_removed_event():
    event = TenantMemberRemovedEvent(tenant_id=TID, user_id=UserID(2), removed_by=OWNER)
    assert event.event_name == "TenantMemberRemoved"
    assert event.user_id == UserID(2)
    assert event.aggregate_id == TID


def test_member_role_changed_names_roles():
    event = TenantMemberRoleChangedEvent(
        tenant_id=TID,
        user_id=UserID(2),
        old_role=TenantRole.GUEST,
        new_role=TenantRole.OWNER,
        changed_by=OWNER,
    )
    assert (event.old_role, event.new_role) == ("guest", "owner")


def test_metadata_is_per_event():
    first = TenantActivatedEvent(tenant_id=TID)
    second = TenantActivatedEvent(tenant_id=TID)
    first.set_metadata("extra", 1)
    assert "extra" not in second.metadata