"""
Authentication Module
Hold the OAuth 1.0a credentials used to sign every request.
"""

import os
from typing import Mapping, NamedTuple

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Settings keys accepted for each credential field, preferred name first.
_SETTINGS_KEYS = {
    "consumer_key": ("consumer_key",),
    "consumer_secret": ("consumer_secret",),
    "access_token": ("access_token", "oauth_access_token"),
    "access_token_secret": ("access_token_secret", "oauth_access_token_secret"),
}

_ENV_KEYS = {
    "consumer_key": "X_API_KEY",
    "consumer_secret": "X_API_SECRET",
    "access_token": "X_ACCESS_TOKEN",
    "access_token_secret": "X_ACCESS_SECRET",
}


class Credentials(NamedTuple):
    """Consumer and access-token credentials for one application/user pair."""

    consumer_key: str
    consumer_secret: str
    access_token: str
    access_token_secret: str

    @classmethod
    def from_settings(cls, settings: Mapping[str, str]) -> "Credentials":
        """
        Build credentials from a configuration record.

        Args:
            settings: Mapping holding consumer_key, consumer_secret,
                access_token and access_token_secret. The access token fields
                may also be given as oauth_access_token and
                oauth_access_token_secret.

        Returns:
            Validated credentials

        Raises:
            ConfigurationError: If any of the four fields is absent or empty
        """
        values = {}
        for field, keys in _SETTINGS_KEYS.items():
            values[field] = next((settings[k] for k in keys if settings.get(k)), None)
        return cls._checked(values)

    @classmethod
    def from_env(cls) -> "Credentials":
        """Build credentials from X_API_KEY, X_API_SECRET, X_ACCESS_TOKEN and X_ACCESS_SECRET."""
        load_dotenv()
        return cls._checked({field: os.getenv(var) for field, var in _ENV_KEYS.items()})

    @classmethod
    def _checked(cls, values: dict) -> "Credentials":
        missing = [field for field in cls._fields if not values.get(field)]
        if missing:
            raise ConfigurationError(
                "Missing required authentication credentials: %s" % ", ".join(missing)
            )
        return cls(**{field: values[field] for field in cls._fields})

    def validate(self) -> "Credentials":
        """Re-check that no field is empty. Returns self for chaining."""
        return self._checked(self._asdict())

    def __repr__(self) -> str:
        return "Credentials(consumer_key=%r, access_token=%r)" % (
            self.consumer_key,
            self.access_token,
        )
