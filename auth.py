#!/usr/bin/env python3
"""
Service-account authentication for gworkspace-reader.

A single service account with domain-wide delegation impersonates the
target user on every call. Credentials are built fresh per identity; only
the parsed key file is memoized.

Usage:
    uv run python -m auth                         # Check default identity
    uv run python -m auth --user someone@corp.com # Check a specific identity

Prerequisites:
    - GOOGLE_SERVICE_ACCOUNT_KEY_PATH pointing at the JSON key
    - Client ID authorized for SCOPES in the Workspace admin console
"""

import argparse
import json
import sys
import threading
from typing import Any

from dotenv import load_dotenv
from google.oauth2 import service_account

from config import KEY_PATH_ENV, USER_EMAIL_ENV, SCOPES, get_key_path, get_default_user
from logging_config import logger
from models import ReaderError, ErrorKind

REQUIRED_KEY_FIELDS = ("client_email", "private_key")

_key_lock = threading.Lock()
_key_info: dict[str, Any] | None = None


def resolve_identity(explicit: str | None = None) -> str:
    """
    Decide which user to impersonate.

    Explicit identity wins, then GW_USER_EMAIL. Neither is a configuration error.
    """
    if explicit and explicit.strip():
        return explicit.strip()

    default = get_default_user()
    if default:
        return default

    raise ReaderError(
        ErrorKind.CONFIGURATION,
        f"{USER_EMAIL_ENV} environment variable is not set. "
        "Set it in your .env file or pass user_email explicitly.",
    )


def _read_key_file(path: str) -> dict[str, Any]:
    try:
        with open(path) as f:
            info = json.load(f)
    except OSError as e:
        raise ReaderError(
            ErrorKind.CONFIGURATION,
            f"Cannot read service account key at {path} ({KEY_PATH_ENV}): {e}",
        ) from e
    except json.JSONDecodeError as e:
        raise ReaderError(
            ErrorKind.CONFIGURATION,
            f"Service account key at {path} ({KEY_PATH_ENV}) is not valid JSON: {e}",
        ) from e

    if not isinstance(info, dict):
        raise ReaderError(
            ErrorKind.CONFIGURATION,
            f"Service account key at {path} ({KEY_PATH_ENV}) is not a JSON object",
        )

    missing = [name for name in REQUIRED_KEY_FIELDS if not info.get(name)]
    if missing:
        raise ReaderError(
            ErrorKind.CONFIGURATION,
            f"Service account key at {path} ({KEY_PATH_ENV}) is missing: {', '.join(missing)}",
        )
    return info


def load_service_account_key() -> dict[str, Any]:
    """
    Load and memoize the service-account key.

    Safe under concurrent first use: at most one load populates the cache.
    A failed load leaves the cache empty so the next call retries.
    """
    global _key_info

    if _key_info is not None:
        return _key_info

    with _key_lock:
        if _key_info is None:
            path = get_key_path()
            if not path:
                raise ReaderError(
                    ErrorKind.CONFIGURATION,
                    f"{KEY_PATH_ENV} environment variable is not set. "
                    "Point it at the service account JSON key.",
                )
            _key_info = _read_key_file(path)
            logger.info(f"Loaded service account key for {_key_info['client_email']}")
        return _key_info


def clear_key_cache() -> None:
    """Forget the memoized key. Useful for testing or after key rotation."""
    global _key_info
    with _key_lock:
        _key_info = None


def create_credentials(identity: str) -> service_account.Credentials:
    """Build delegated credentials bound to one identity and the read-only scopes."""
    info = load_service_account_key()
    try:
        return service_account.Credentials.from_service_account_info(
            info, scopes=SCOPES, subject=identity
        )
    except (ValueError, KeyError) as e:
        raise ReaderError(
            ErrorKind.CONFIGURATION,
            f"Service account key ({KEY_PATH_ENV}) is malformed: {e}",
        ) from e


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Check service-account delegation setup for gworkspace-reader"
    )
    parser.add_argument(
        '--user',
        type=str,
        help=f'Identity to impersonate (default: ${USER_EMAIL_ENV})'
    )

    args = parser.parse_args()
    load_dotenv()

    try:
        identity = resolve_identity(args.user)
        create_credentials(identity)
        info = load_service_account_key()
    except ReaderError as e:
        print(f"Configuration error: {e.message}")
        sys.exit(1)

    print(f"Service account: {info['client_email']}")
    if info.get('client_id'):
        print(f"Client ID:       {info['client_id']}")
    print(f"Impersonating:   {identity}")
    print()
    print("Grant these scopes to the client ID under domain-wide delegation:")
    print(",".join(SCOPES))


if __name__ == '__main__':
    main()
