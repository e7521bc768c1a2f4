import json

from dddscaffold.user_repository import (
    UserListCriteria,
    UserListItemDTO,
    UserProfileDTO,
    UserSearchCriteria,
    UserStatisticsDTO,
)
from dddscaffold.user_values import UserGender, UserID, UserStatus


def test_empty_search_criteria_serialises_to_nothing():
    assert UserSearchCriteria().to_dict() == {}


def test_search_criteria_keeps_set_fields():
    data = UserSearchCriteria(keyword="ali", status=UserStatus.PENDING, gender=UserGender.FEMALE).to_dict()
    assert data == {
        "keyword": "ali",
        "status": int(UserStatus.PENDING),
        "gender": int(UserGender.FEMALE),
    }


def test_pointer_field_with_empty_value_is_kept():
    data = UserSearchCriteria(created_from="").to_dict()
    assert data == {"created_from": ""}


def test_list_criteria_omits_defaults():
    assert UserListCriteria().to_dict() == {}
    data = UserListCriteria(sort_by="created_at", sort_desc=True).to_dict()
    assert data == {"sort_by": "created_at", "sort_desc": True}


def test_profile_omits_missing_last_login():
    profile = UserProfileDTO(user_id=UserID(9), username="alice", email="alice@example.com")
    data = profile.to_dict()
    assert "last_login_at" not in data
    assert data["user_id"] == 9
    assert data["status"] == int(UserStatus.PENDING)


def test_profile_includes_last_login_when_set():
    profile = UserProfileDTO(
        user_id=UserID(9),
        username="alice",
        email="alice@example.com",
        last_login_at="2024-01-01T00:00:00Z",
    )
    assert profile.to_dict()["last_login_at"] == "2024-01-01T00:00:00Z"


def test_list_item_round_trips_through_json():
    item = UserListItemDTO(user_id=UserID(3), username="bob", email="bob@example.com", status=UserStatus.ACTIVE)
    decoded = json.loads(json.dumps(item.to_dict()))
    assert decoded == item.to_dict()
    assert decoded["username"] == "bob"


def test_statistics_keys():
    data = UserStatisticsDTO(total_users=5).to_dict()
    assert set(data) == {
        "total_users",
        "active_users",
        "inactive_users",
        "pending_users",
        "locked_users",
        "today_logins",
        "this_week_logins",
        "this_month_logins",
        "average_session_duration",
    }
    assert data["total_users"] == 5