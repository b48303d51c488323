"""
In-memory credential store.
"""

import logging
from typing import Dict, Optional

from ..config import ConfigParams, Reconfigurable
from .params import CredentialParams
from .types import CredentialStore


logger = logging.getLogger(__name__)


class MemoryCredentialStore(CredentialStore, Reconfigurable):
    """
    Credential store that keeps credentials in memory.

    Each top-level configuration key becomes one credential whose value is
    parsed as a credential string.

    Example:
        store = MemoryCredentialStore(ConfigParams.from_tuples(
            "key1", "user=jdoe;pass=pass123",
            "key2", "user=ssmith;pass=mypass"
        ))
        credential = await store.lookup(None, "key1")
    """

    def __init__(self, config: Optional[ConfigParams] = None):
        self._items: Dict[str, CredentialParams] = {}

        if config is not None:
            self.configure(config)

    def configure(self, config: ConfigParams) -> None:
        self.read_credentials(config)

    def read_credentials(self, config: ConfigParams) -> None:
        """Replace all credentials with the ones read from configuration."""
        self._items = {}

        for key in config.keys():
            value = config.get_as_nullable_string(key)
            self._items[key] = CredentialParams.from_string(value)

    async def store(self, correlation_id: Optional[str], key: str,
                    credential: Optional[CredentialParams]) -> None:
        if credential is not None:
            self._items[key] = credential
        else:
            self._items.pop(key, None)
        logger.debug(f"Stored credential {key}")

    async def lookup(self, correlation_id: Optional[str], key: str) -> Optional[CredentialParams]:
        return self._items.get(key)
