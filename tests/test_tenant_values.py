import pytest

from dddscaffold.tenant_values import (
    TenantCode,
    TenantConfig,
    TenantID,
    TenantMember,
    TenantRole,
    TenantStatus,
    default_tenant_config,
)
from dddscaffold.user_values import UserID, ValidationError


def test_tenant_id_string_form():
    assert str(TenantID(1)) == "tenant-1"


def test_tenant_id_equality():
    assert TenantID(5).equals(TenantID(5))
    assert not TenantID(5).equals(TenantID(6))
    assert not TenantID(5).equals(UserID(5))


def test_tenant_code_is_normalised():
    code = TenantCode("  acme_co ")
    assert code.value == "ACME_CO"


def test_tenant_code_normalisation_is_stable():
    code = TenantCode("abc-9")
    assert TenantCode(code.value).value == code.value


@pytest.mark.parametrize(
    "raw, message",
    [
        ("", "tenant code cannot be empty"),
        ("   ", "tenant code cannot be empty"),
        ("ab", "tenant code must be at least 3 characters long"),
        ("A" * 21, "tenant code cannot exceed 20 characters"),
        (
            "AB C",
            "tenant code can only contain uppercase letters, numbers, underscores and hyphens",
        ),
        (
            "abc!",
            "tenant code can only contain uppercase letters, numbers, underscores and hyphens",
        ),
    ],
)
def test_tenant_code_rejects_invalid(raw, message):
    with pytest.raises(ValidationError) as info:
        TenantCode(raw)
    assert info.value.field == "code"
    assert info.value.message == message


@pytest.mark.parametrize("raw", ["ABC", "A" * 20, "A1_-"])
def test_tenant_code_accepts_boundaries(raw):
    assert TenantCode(raw).value == raw


def test_tenant_code_equals():
    assert TenantCode("acme").equals(TenantCode("ACME"))
    assert not TenantCode("acme").equals(TenantCode("other"))
    assert not TenantCode("acme").equals(None)


@pytest.mark.parametrize("number, text", [(0, "active"), (1, "inactive"), (2, "suspended")])
def test_status_names(number, text):
    assert str(TenantStatus(number)) == text


@pytest.mark.parametrize(
    "number, text", [(0, "owner"), (1, "admin"), (2, "member"), (3, "guest")]
)
def test_role_names(number, text):
    assert str(TenantRole(number)) == text


def test_default_config_values():
    config = default_tenant_config()
    assert config.max_storage_gb == 10
    assert config.max_projects == 10
    assert config.allowed_features == ["basic", "api_access"]
    assert config.custom_settings == {}
    assert config.require_mfa is False
    assert config.session_timeout_min == 30


def test_default_configs_are_independent():
    first = default_tenant_config()
    second = default_tenant_config()
    first.allowed_features.append("extra")
    first.custom_settings["key"] = "value"
    assert second.allowed_features == TenantConfig().allowed_features
    assert second.custom_settings == {}


def test_member_role_can_change():
    member = TenantMember(
        user_id=UserID(3), tenant_id=TenantID(1), role=TenantRole.MEMBER, joined_at="now"
    )
    member.role = TenantRole.ADMIN
    assert member.role is TenantRole.ADMIN
    assert member.user_id == UserID(3)