"""
Credential parameters.

Credentials are kept apart from connections because they need stricter
storage. A credential either carries its secrets directly or only a
store key to be looked up in a credential store.
"""

from typing import Any, List, Mapping, Optional

from ..config import ConfigParams


class CredentialParams(ConfigParams):
    """
    Typed view over credential configuration.

    Recognized parameters:
        store_key: Key to look the credential up in a credential store
        username: User name (``user`` is accepted as an alias)
        password: User password (``pass`` is accepted as an alias)
        access_id: Application access id (``client_id`` is accepted as an alias)
        access_key: Application secret key (``client_key`` is accepted as an alias)
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        super().__init__(values)

    def use_credential_store(self) -> bool:
        """Check whether the credential must be looked up in a credential store."""
        return self.get_as_nullable_string("store_key") is not None

    def get_store_key(self) -> Optional[str]:
        return self.get_as_nullable_string("store_key")

    def set_store_key(self, value: Optional[str]) -> None:
        self.put("store_key", value)

    def get_username(self) -> Optional[str]:
        return self.get_as_nullable_string("username") or self.get_as_nullable_string("user")

    def set_username(self, value: Optional[str]) -> None:
        self.put("username", value)

    def get_password(self) -> Optional[str]:
        return self.get_as_nullable_string("password") or self.get_as_nullable_string("pass")

    def set_password(self, value: Optional[str]) -> None:
        self.put("password", value)

    def get_access_id(self) -> Optional[str]:
        return self.get_as_nullable_string("access_id") or self.get_as_nullable_string("client_id")

    def set_access_id(self, value: Optional[str]) -> None:
        self.put("access_id", value)

    def get_access_key(self) -> Optional[str]:
        return self.get_as_nullable_string("access_key") or self.get_as_nullable_string("client_key")

    def set_access_key(self, value: Optional[str]) -> None:
        self.put("access_key", value)

    @classmethod
    def from_string(cls, line: Optional[str]) -> "CredentialParams":
        return cls(ConfigParams.from_string(line))

    @classmethod
    def many_from_config(cls, config: ConfigParams) -> List["CredentialParams"]:
        """
        Read credentials from the ``credentials`` section, one per sub-section,
        or from the single ``credential`` section when there are none.
        """
        result: List[CredentialParams] = []

        credentials = config.get_section("credentials")

        for section in credentials.get_section_names():
            credential = credentials.get_section(section)
            if len(credential) > 0:
                result.append(cls(credential))

        if not result:
            credential = config.get_section("credential")
            if len(credential) > 0:
                result.append(cls(credential))

        return result

    @classmethod
    def from_config(cls, config: ConfigParams) -> Optional["CredentialParams"]:
        """Read the first credential from configuration."""
        credentials = cls.many_from_config(config)
        return credentials[0] if credentials else None
