"""
Unit tests for infrastructure/db/store.py
"""

from unittest.mock import MagicMock, patch

import pytest

from infrastructure.db import (
    InMemoryExerciseRepository,
    InMemoryStore,
    InMemoryUserRepository,
    StoreClosedError,
    StoreConfigurationError,
    SupabaseExerciseRepository,
    SupabaseStore,
    SupabaseUserRepository,
    open_store,
)


@pytest.mark.unit
class TestOpenStore:

    def test_memory_backend(self):
        assert isinstance(open_store("memory"), InMemoryStore)

    def test_unknown_backend(self):
        with pytest.raises(StoreConfigurationError, match="Unknown store backend"):
            open_store("sqlite")

    @pytest.mark.parametrize(
        "url,key",
        [(None, "key"), ("https://x.supabase.co", None), ("", "")],
    )
    def test_supabase_requires_url_and_key(self, url, key):
        with pytest.raises(StoreConfigurationError):
            open_store("supabase", supabase_url=url, supabase_key=key)

    def test_supabase_backend_creates_client(self):
        with patch("infrastructure.db.store.create_client") as mock_create:
            store = open_store(
                "supabase",
                supabase_url="https://x.supabase.co",
                supabase_key="service-key",
            )

        mock_create.assert_called_once_with("https://x.supabase.co", "service-key")
        assert isinstance(store, SupabaseStore)
        assert store.client is mock_create.return_value


@pytest.mark.unit
class TestSupabaseStore:

    def test_repositories_share_the_client(self):
        client = MagicMock()
        store = SupabaseStore(client)

        assert isinstance(store.user_repository(), SupabaseUserRepository)
        assert isinstance(store.exercise_repository(), SupabaseExerciseRepository)

    def test_close_releases_session(self):
        client = MagicMock()
        store = SupabaseStore(client)

        store.close()

        client.postgrest.session.close.assert_called_once()
        with pytest.raises(StoreClosedError):
            store.user_repository()

    def test_close_twice_is_safe(self):
        client = MagicMock()
        store = SupabaseStore(client)
        store.close()
        store.close()
        client.postgrest.session.close.assert_called_once()


@pytest.mark.unit
class TestInMemoryStore:

    def test_repositories_share_data(self):
        store = InMemoryStore()
        users = store.user_repository()
        assert isinstance(users, InMemoryUserRepository)

        created = users.create("alice")

        assert store.user_repository().get_by_id(created["id"])["username"] == "alice"

    def test_exercise_repository_type(self):
        assert isinstance(InMemoryStore().exercise_repository(), InMemoryExerciseRepository)

    def test_closed_store_refuses_repositories(self):
        store = InMemoryStore()
        store.close()
        with pytest.raises(StoreClosedError):
            store.exercise_repository()
