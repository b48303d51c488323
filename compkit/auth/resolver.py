"""
Credential resolver.
"""

import logging
from typing import List, Optional

from ..config import ConfigParams
from ..errors import ReferenceMissingError
from ..refer import Descriptor, Referenceable, References
from .params import CredentialParams


logger = logging.getLogger(__name__)


class CredentialResolver(Referenceable):
    """
    Resolves credentials from configuration with optional credential store lookup.

    A credential without ``store_key`` is returned as is. A credential with
    ``store_key`` is looked up in the credential stores found in references,
    and the stored values are merged over it.

    Configuration parameters:
        credential: Single credential section
            store_key: (optional) Key to look the credential up in a store
            username, password, access_id, access_key: Credential values
        credentials: Alternative section with several named credentials

    References:
        *:credential-store:*:*:* Credential stores used to look up credentials
    """

    CREDENTIAL_STORE_DESCRIPTOR = Descriptor("*", "credential-store", "*", "*", "*")

    def __init__(self, config: Optional[ConfigParams] = None,
                 references: Optional[References] = None):
        self._credentials: List[CredentialParams] = []
        self._references: Optional[References] = None

        if config is not None:
            self.configure(config)
        if references is not None:
            self.set_references(references)

    def set_references(self, references: References) -> None:
        self._references = references

    def configure(self, config: ConfigParams) -> None:
        self._credentials.extend(CredentialParams.many_from_config(config))

    def get_all(self) -> List[CredentialParams]:
        """Get all credentials as configured, without looking up store keys."""
        return self._credentials

    def add(self, credential: CredentialParams) -> None:
        self._credentials.append(credential)

    def _find_stores(self, correlation_id: Optional[str]) -> list:
        stores = self._references.get_optional(self.CREDENTIAL_STORE_DESCRIPTOR)
        if len(stores) == 0:
            raise ReferenceMissingError(correlation_id, self.CREDENTIAL_STORE_DESCRIPTOR)
        return stores

    async def lookup_in_stores(self, correlation_id: Optional[str],
                               credential: CredentialParams) -> Optional[CredentialParams]:
        """
        Look a credential up in every registered credential store.

        Raises:
            ReferenceMissingError: If no credential store is registered
        """
        if not credential.use_credential_store():
            return None

        if self._references is None:
            return None

        key = credential.get_store_key()

        for store in self._find_stores(correlation_id):
            result = await store.lookup(correlation_id, key)
            if result is not None:
                logger.debug(f"Found credential {key} in credential store")
                return result

        return None

    async def lookup(self, correlation_id: Optional[str]) -> Optional[CredentialParams]:
        """
        Look up a single credential.

        The first credential without a store key is returned immediately.
        Otherwise credentials are looked up in stores in order, and the first
        hit is merged over its configured entry.
        """
        if len(self._credentials) == 0:
            return None

        for credential in self._credentials:
            if not credential.use_credential_store():
                return credential

        for credential in self._credentials:
            result = await self.lookup_in_stores(correlation_id, credential)
            if result is not None:
                return CredentialParams(ConfigParams.merge_configs(credential, result))

        return None

    async def register(self, correlation_id: Optional[str], credential: CredentialParams) -> bool:
        """
        Store a credential in every credential store and keep it locally.

        Returns:
            True if the credential was stored, False if it has no store key
            or no references are set
        """
        if not credential.use_credential_store():
            return False

        if self._references is None:
            return False

        key = credential.get_store_key()

        for store in self._references.get_optional(self.CREDENTIAL_STORE_DESCRIPTOR):
            await store.store(correlation_id, key, credential)

        self._credentials.append(credential)
        return True
