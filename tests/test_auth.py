"""
Tests for credential parameters, credential stores and the credential resolver.
"""

from unittest.mock import AsyncMock

import pytest

from compkit.auth import (
    CredentialParams, CredentialResolver, DefaultCredentialStoreFactory, MemoryCredentialStore
)
from compkit.config import ConfigParams
from compkit.errors import ReferenceMissingError
from compkit.refer import Descriptor, References


STORE_LOCATOR = Descriptor("compkit", "credential-store", "memory", "default", "1.0")


class TestCredentialParams:
    """Test CredentialParams accessors and config parsing."""

    def test_aliases(self):
        """Test that short parameter names are accepted."""
        credential = CredentialParams.from_string("user=jdoe;pass=pass123;client_id=app;client_key=secret")

        assert credential.get_username() == "jdoe"
        assert credential.get_password() == "pass123"
        assert credential.get_access_id() == "app"
        assert credential.get_access_key() == "secret"
        assert not credential.use_credential_store()

    def test_setters(self):
        """Test setting credential values."""
        credential = CredentialParams()
        credential.set_username("jdoe")
        credential.set_password("secret")
        credential.set_store_key("key1")

        assert credential["username"] == "jdoe"
        assert credential.get_password() == "secret"
        assert credential.use_credential_store()
        assert credential.get_store_key() == "key1"

    def test_many_from_config(self):
        """Test reading the plural section before the singular one."""
        config = ConfigParams.from_tuples(
            "credentials.one.username", "a",
            "credentials.two.username", "b",
            "credential.username", "ignored"
        )

        assert [c.get_username() for c in CredentialParams.many_from_config(config)] == ["a", "b"]

        config = ConfigParams.from_tuples("credential.username", "c")
        assert CredentialParams.from_config(config).get_username() == "c"


class TestMemoryCredentialStore:
    """Test the in-memory credential store."""

    @pytest.mark.asyncio
    async def test_configured_credentials(self):
        """Test looking up credentials read from configuration."""
        store = MemoryCredentialStore(ConfigParams.from_tuples(
            "key1", "user=jdoe;pass=pass123",
            "key2", "user=ssmith;pass=mypass"
        ))

        credential = await store.lookup("123", "key1")
        assert credential.get_username() == "jdoe"
        assert credential.get_password() == "pass123"

        assert await store.lookup("123", "missing") is None

    @pytest.mark.asyncio
    async def test_store_and_remove(self):
        """Test storing and removing credentials."""
        store = MemoryCredentialStore()

        await store.store(None, "key1", CredentialParams.from_string("user=a"))
        assert (await store.lookup(None, "key1")).get_username() == "a"

        await store.store(None, "key1", CredentialParams.from_string("user=b"))
        assert (await store.lookup(None, "key1")).get_username() == "b"

        await store.store(None, "key1", None)
        assert await store.lookup(None, "key1") is None

    def test_factory(self):
        """Test creating a credential store by descriptor."""
        factory = DefaultCredentialStoreFactory()

        assert isinstance(factory.create(STORE_LOCATOR), MemoryCredentialStore)


class TestCredentialResolver:
    """Test looking up credentials with and without stores."""

    @pytest.mark.asyncio
    async def test_empty_resolver(self):
        """Test that a resolver without credentials finds nothing."""
        assert await CredentialResolver().lookup("123") is None

    @pytest.mark.asyncio
    async def test_configured_credential(self):
        """Test returning a credential given directly in configuration."""
        resolver = CredentialResolver(ConfigParams.from_tuples(
            "credential.username", "jdoe",
            "credential.password", "secret"
        ))

        credential = await resolver.lookup("123")

        assert credential.get_username() == "jdoe"
        assert len(resolver.get_all()) == 1

    @pytest.mark.asyncio
    async def test_direct_credential_skips_stores(self):
        """Test that a direct credential is returned without calling stores."""
        store = MemoryCredentialStore()
        spy = AsyncMock(wraps=store)
        spy.lookup = AsyncMock(wraps=store.lookup)

        resolver = CredentialResolver(references=References.from_tuples(STORE_LOCATOR, spy))
        resolver.add(CredentialParams.from_string("store_key=key1"))
        resolver.add(CredentialParams.from_string("username=direct"))

        credential = await resolver.lookup("123")

        assert credential.get_username() == "direct"
        assert spy.lookup.await_count == 0

    @pytest.mark.asyncio
    async def test_lookup_in_store(self):
        """Test merging a stored credential over its configured entry."""
        store = MemoryCredentialStore(ConfigParams.from_tuples(
            "key1", "username=jdoe;password=secret"
        ))

        resolver = CredentialResolver(
            ConfigParams.from_tuples(
                "credential.store_key", "key1",
                "credential.access_id", "app"
            ),
            References.from_tuples(STORE_LOCATOR, store)
        )

        credential = await resolver.lookup("123")

        assert credential.get_username() == "jdoe"
        assert credential.get_password() == "secret"
        assert credential.get_access_id() == "app"
        assert isinstance(credential, CredentialParams)

    @pytest.mark.asyncio
    async def test_missing_in_store(self):
        """Test that a key missing from every store gives no result."""
        resolver = CredentialResolver(
            ConfigParams.from_tuples("credential.store_key", "key1"),
            References.from_tuples(STORE_LOCATOR, MemoryCredentialStore())
        )

        assert await resolver.lookup("123") is None

    @pytest.mark.asyncio
    async def test_missing_store_fails(self):
        """Test that store keys without any credential store fail."""
        resolver = CredentialResolver(
            ConfigParams.from_tuples("credential.store_key", "key1"),
            References()
        )

        with pytest.raises(ReferenceMissingError):
            await resolver.lookup("123")

    @pytest.mark.asyncio
    async def test_register(self):
        """Test storing a credential through the resolver."""
        store = MemoryCredentialStore()
        resolver = CredentialResolver(references=References.from_tuples(STORE_LOCATOR, store))

        credential = CredentialParams.from_string("store_key=key1;username=jdoe")
        assert await resolver.register("123", credential) is True

        assert (await store.lookup("123", "key1")).get_username() == "jdoe"
        assert (await resolver.lookup("123")).get_username() == "jdoe"

        assert await resolver.register("123", CredentialParams.from_string("username=x")) is False

    @pytest.mark.asyncio
    async def test_register_failure_is_not_kept(self):
        """Test that a credential is not kept when storing it fails."""
        store = MemoryCredentialStore()
        store.store = AsyncMock(side_effect=RuntimeError("store unavailable"))
        resolver = CredentialResolver(references=References.from_tuples(STORE_LOCATOR, store))

        with pytest.raises(RuntimeError):
            await resolver.register("123", CredentialParams.from_string("store_key=key1;username=jdoe"))

        assert resolver.get_all() == []
