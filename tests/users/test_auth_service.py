import pytest
from werkzeug.security import generate_password_hash

from src.class_attendance.class_attendance.core.exceptions import AuthenticationError, ValidationError
from src.class_attendance.class_attendance.users.model import User
from src.class_attendance.class_attendance.users.service import AuthService, UserService


def test_register_then_login(users_repo):
    user_id = UserService(users_repo).register(full_name="An", username="an", password="secret1")

    s_user = AuthService(users_repo).authenticate("an", "secret1")

    assert s_user.user_id == user_id
    assert s_user.full_name == "An"
    assert users_repo.get_by_id(user_id).password_hash != "secret1"


def test_wrong_password_raises(users_repo):
    UserService(users_repo).register(full_name="An", username="an", password="secret1")

    with pytest.raises(AuthenticationError):
        AuthService(users_repo).authenticate("an", "wrong")


def test_inactive_or_placeholder_hash_cannot_login(users_repo):
    users_repo.users[1] = User(1, "A", "a", generate_password_hash("pw1234"), is_active=False)
    users_repo.users[2] = User(2, "B", "b", "CHANGE_ME")

    with pytest.raises(AuthenticationError):
        AuthService(users_repo).authenticate("a", "pw1234")
    with pytest.raises(AuthenticationError):
        AuthService(users_repo).authenticate("b", "CHANGE_ME")


def test_register_validation(users_repo):
    svc = UserService(users_repo)

    with pytest.raises(ValidationError):
        svc.register(full_name="", username="x", password="secret1")
    with pytest.raises(ValidationError):
        svc.register(full_name="X", username="x", password="123")

    svc.register(full_name="X", username="x", password="secret1")
    with pytest.raises(ValidationError):
        svc.register(full_name="Y", username="x", password="secret2")
