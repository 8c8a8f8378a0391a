"""
Credential Context

Service account identity and target zone, validated once and shared
(read-only) by every request and upload of a client instance.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union

from config.settings import CLOUDFLARE_API_HOST
from cfstream.constants import (
    HEADER_AUTH_EMAIL,
    HEADER_AUTH_KEY,
    MEDIA_PATH_TEMPLATE,
    MISSING_CREDENTIALS_MESSAGE,
    UPLOAD_ENDPOINT_TEMPLATE,
)
from cfstream.exceptions import ConfigurationError

REQUIRED_FIELDS = ("zone", "email", "key")


@dataclass(frozen=True)
class Credentials:
    """
    Immutable Cloudflare credentials with derived endpoints.

    Attributes:
        zone: Zone identifier the videos are scoped to
        email: Account email (X-Auth-Email)
        key: Account API key (X-Auth-Key)
        api_host: Host of all REST calls
        collection_path: REST path of the zone's video collection
        upload_endpoint: Fully-qualified tus endpoint

    Example:
        creds = Credentials.from_mapping(
            {"zone": "023e105f4ecef8ad", "email": "me@example.com", "key": "c2547eb7"}
        )
        creds.collection_path  # "/client/v4/zones/023e105f4ecef8ad/media"
    """

    zone: str
    email: str
    key: str = field(repr=False)
    api_host: str = field(init=False)
    collection_path: str = field(init=False)
    upload_endpoint: str = field(init=False)

    def __post_init__(self) -> None:
        missing = [name for name in REQUIRED_FIELDS if not getattr(self, name)]
        if missing:
            raise ConfigurationError(
                f"{MISSING_CREDENTIALS_MESSAGE} (missing: {', '.join(missing)})",
            )

        # frozen dataclass - derived fields are set once here
        object.__setattr__(self, "api_host", CLOUDFLARE_API_HOST)
        object.__setattr__(
            self, "collection_path", MEDIA_PATH_TEMPLATE.format(zone=self.zone)
        )
        object.__setattr__(
            self, "upload_endpoint", UPLOAD_ENDPOINT_TEMPLATE.format(zone=self.zone)
        )

    @classmethod
    def from_mapping(
        cls, credentials: Union["Credentials", Mapping[str, Any]]
    ) -> "Credentials":
        """
        Build credentials from a {zone, email, key} mapping.

        Args:
            credentials: Mapping, or an existing Credentials (returned as-is)

        Returns:
            Validated Credentials

        Raises:
            ConfigurationError: If any field is missing or empty
        """
        if isinstance(credentials, cls):
            return credentials
        if not isinstance(credentials, Mapping):
            raise ConfigurationError(MISSING_CREDENTIALS_MESSAGE)

        return cls(
            zone=credentials.get("zone") or "",
            email=credentials.get("email") or "",
            key=credentials.get("key") or "",
        )

    @property
    def identity_headers(self) -> Dict[str, str]:
        """Headers identifying the account (a fresh dict on every access)"""
        return {
            HEADER_AUTH_EMAIL: self.email,
            HEADER_AUTH_KEY: self.key,
        }
