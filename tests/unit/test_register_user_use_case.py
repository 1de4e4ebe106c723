"""
Unit tests for RegisterUserUseCase.

Uses FakeUserRepository for isolated testing.
"""

import pytest

from application.exceptions import ConflictError, StoreError, ValidationError
from application.use_cases import RegisterUserUseCase
from tests.fakes import FakeUserRepository


class RacingUserRepository(FakeUserRepository):
    """Simulates another request inserting the same username first."""

    def get_by_username(self, username):
        self.calls.append("get_by_username")
        if self.calls.count("get_by_username") == 1:
            return None
        return super().get_by_username(username)

    def create(self, username):
        super().create(username)
        raise ConflictError("Could not create user: record already exists")


@pytest.fixture
def use_case(fake_user_repo):
    return RegisterUserUseCase(user_repo=fake_user_repo)


@pytest.mark.unit
class TestRegisterUser:

    def test_creates_new_user(self, use_case, fake_user_repo):
        result = use_case.execute("fcc_test")

        assert result.created is True
        assert result.user.username == "fcc_test"
        assert result.user.id
        assert fake_user_repo.count() == 1

    def test_username_is_stripped(self, use_case):
        assert use_case.execute("  alice  ").user.username == "alice"

    def test_existing_username_returns_same_user(self, use_case, fake_user_repo):
        first = use_case.execute("alice")
        second = use_case.execute("alice")

        assert second.created is False
        assert second.user.id == first.user.id
        assert fake_user_repo.count() == 1

    def test_usernames_are_case_sensitive(self, use_case, fake_user_repo):
        use_case.execute("alice")
        use_case.execute("Alice")
        assert fake_user_repo.count() == 2

    @pytest.mark.parametrize("username", [None, "", "   "])
    def test_missing_username_raises_validation_error(self, use_case, fake_user_repo, username):
        with pytest.raises(ValidationError, match="username is required"):
            use_case.execute(username)
        assert fake_user_repo.calls == []

    def test_race_on_create_returns_winner(self):
        repo = RacingUserRepository()
        result = RegisterUserUseCase(user_repo=repo).execute("alice")

        assert result.created is False
        assert result.user.username == "alice"

    def test_conflict_without_winner_is_raised(self, use_case, fake_user_repo):
        fake_user_repo.fail_next("create", ConflictError("duplicate"))
        with pytest.raises(ConflictError):
            use_case.execute("alice")

    def test_store_error_propagates(self, use_case, fake_user_repo):
        fake_user_repo.fail_next("get_by_username", StoreError("Could not look up username"))
        with pytest.raises(StoreError):
            use_case.execute("alice")


@pytest.mark.unit
class TestListUsers:

    def test_empty(self, use_case):
        result = use_case.list_users()
        assert result.users == []
        assert result.count == 0

    def test_lists_in_creation_order(self, use_case):
        use_case.execute("first")
        use_case.execute("second")
        use_case.execute("third")

        result = use_case.list_users()
        assert [u.username for u in result.users] == ["first", "second", "third"]
        assert result.count == 3
