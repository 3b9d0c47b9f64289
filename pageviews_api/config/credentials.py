"""Service account key loading for GA4 API authentication."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from google.oauth2 import service_account

ANALYTICS_READONLY_SCOPE: Final[str] = "https://www.googleapis.com/auth/analytics.readonly"
DEFAULT_TOKEN_URI: Final[str] = "https://oauth2.googleapis.com/token"


class CredentialsLoadError(RuntimeError):
    """Raised when the service account key file is missing or invalid."""


@dataclass(frozen=True)
class ServiceAccountKey:
    """Immutable subset of a service account key file.

    Attributes:
        client_email: Service account email address.
        private_key: PEM-encoded private key.
        token_uri: OAuth token endpoint used for credential refresh.
        source_path: Resolved path the key was read from.
    """

    client_email: str
    private_key: str
    token_uri: str
    source_path: str


def config_load_service_account_key(key_file_path: str) -> ServiceAccountKey:
    """Read and validate a service account key file.

    Args:
        key_file_path: Absolute or working-directory-relative key file path.

    Returns:
        ServiceAccountKey: Parsed key fields.

    Raises:
        CredentialsLoadError: Raised when the file is missing, unreadable, not
            JSON, or lacks `client_email` / `private_key`.
    """

    resolved_path = Path(key_file_path).expanduser().resolve()
    try:
        raw_text = resolved_path.read_text(encoding="utf-8")
    except OSError as error:
        raise CredentialsLoadError(f"cannot read service account key file {resolved_path}: {error}") from error

    try:
        key_data = json.loads(raw_text)
    except json.JSONDecodeError as error:
        raise CredentialsLoadError(f"service account key file {resolved_path} is not valid JSON: {error}") from error

    if not isinstance(key_data, dict):
        raise CredentialsLoadError(f"service account key file {resolved_path} must contain a JSON object")

    missing_fields = [
        field_name
        for field_name in ("client_email", "private_key")
        if not isinstance(key_data.get(field_name), str) or not key_data[field_name].strip()
    ]
    if missing_fields:
        raise CredentialsLoadError(
            f"service account key file {resolved_path} is missing required fields: {', '.join(missing_fields)}"
        )

    token_uri = key_data.get("token_uri")
    if not isinstance(token_uri, str) or not token_uri.strip():
        token_uri = DEFAULT_TOKEN_URI

    return ServiceAccountKey(
        client_email=key_data["client_email"].strip(),
        private_key=key_data["private_key"],
        token_uri=token_uri.strip(),
        source_path=str(resolved_path),
    )


def config_build_google_credentials(key: ServiceAccountKey) -> service_account.Credentials:
    """Build read-only GA4 credentials from a loaded key.

    Args:
        key: Loaded service account key.

    Returns:
        service_account.Credentials: Scoped credentials shared by both GA4 clients.

    Raises:
        CredentialsLoadError: Raised when google-auth rejects the key material.
    """

    try:
        return service_account.Credentials.from_service_account_info(
            {
                "client_email": key.client_email,
                "private_key": key.private_key,
                "token_uri": key.token_uri,
            },
            scopes=[ANALYTICS_READONLY_SCOPE],
        )
    except (ValueError, TypeError) as error:
        raise CredentialsLoadError(
            f"service account key from {key.source_path} could not be parsed: {error}"
        ) from error
