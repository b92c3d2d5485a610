"""
API key authentication for the ShipEngine client

ShipEngine authenticates every request with an ``API-Key`` header. The key
is fixed when the client is built.
"""

from typing import Dict, Union

from pydantic import SecretStr

from ..core.error_handler import ConfigurationError

API_KEY_HEADER = 'API-Key'


class ApiKeyAuthentication:
    """Holds the API key and produces the authentication header."""

    def __init__(self, api_key: Union[str, SecretStr]):
        if isinstance(api_key, SecretStr):
            api_key = api_key.get_secret_value()
        if not isinstance(api_key, str) or not api_key.strip():
            raise ConfigurationError("A ShipEngine API key is required")
        self._api_key = api_key.strip()

    def headers(self) -> Dict[str, str]:
        return {API_KEY_HEADER: self._api_key}

    @property
    def is_test_key(self) -> bool:
        """Sandbox keys are prefixed with ``TEST_``"""
        return self._api_key.startswith('TEST_')

    def masked(self) -> str:
        """Key with all but the last four characters hidden, for logs"""
        if len(self._api_key) <= 4:
            return '****'
        return '*' * (len(self._api_key) - 4) + self._api_key[-4:]

    def __repr__(self) -> str:
        return f"ApiKeyAuthentication(api_key='{self.masked()}')"
