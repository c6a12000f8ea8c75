import pytest

from chess_club.core.exceptions import AuthenticationError
from chess_club.users.service import AuthService


def test_auth_ok(coaches_repo):
    coach = AuthService(coaches_repo).authenticate("coach", "secret")
    assert coach.coach_id == 1
    assert coach.full_name == "Coach Carter"


@pytest.mark.parametrize("username,password", [("coach", "wrong"), ("nobody", "secret")])
def test_auth_wrong_credentials_raise(coaches_repo, username, password):
    with pytest.raises(AuthenticationError):
        AuthService(coaches_repo).authenticate(username, password)
