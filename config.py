"""
Configuration - Single Source of Truth

Scopes, environment variable names and output limits. Do not duplicate elsewhere.
"""

import os

# Read-only scopes, one per API. These must match what the Workspace admin
# granted to the service account's client ID for domain-wide delegation.
SCOPES = [
    'https://www.googleapis.com/auth/gmail.readonly',
    'https://www.googleapis.com/auth/drive.readonly',
    'https://www.googleapis.com/auth/spreadsheets.readonly',
    'https://www.googleapis.com/auth/documents.readonly',
    'https://www.googleapis.com/auth/calendar.readonly',
    'https://www.googleapis.com/auth/presentations.readonly',
    'https://www.googleapis.com/auth/admin.directory.user.readonly',
]

# Environment variables
KEY_PATH_ENV = 'GOOGLE_SERVICE_ACCOUNT_KEY_PATH'
USER_EMAIL_ENV = 'GW_USER_EMAIL'
LOG_LEVEL_ENV = 'GW_LOG_LEVEL'
API_TIMEOUT_ENV = 'GW_API_TIMEOUT'

# Default timeout for all Google API calls (seconds)
DEFAULT_API_TIMEOUT = 60

# Output ceilings (characters). Mail bodies get the smaller one.
BODY_LIMIT = 50_000
BULK_LIMIT = 100_000

# Attachments above this are not inlined; the caller gets a link instead
MAX_INLINE_ATTACHMENT_BYTES = 10 * 1024 * 1024

# Result caps for list operations
MAX_SEARCH_RESULTS = 100
MAX_DIRECTORY_RESULTS = 500
DIRECTORY_PAGE_SIZE = 500


def get_key_path() -> str | None:
    """Service-account key path from the environment, or None."""
    value = os.environ.get(KEY_PATH_ENV, '').strip()
    return value or None


def get_default_user() -> str | None:
    """Default identity from the environment, or None."""
    value = os.environ.get(USER_EMAIL_ENV, '').strip()
    return value or None


def get_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, 'INFO').strip() or 'INFO'


def get_api_timeout() -> int:
    """Transport timeout in seconds. Falls back to the default on junk values."""
    raw = os.environ.get(API_TIMEOUT_ENV, '').strip()
    if not raw:
        return DEFAULT_API_TIMEOUT
    try:
        timeout = int(raw)
    except ValueError:
        return DEFAULT_API_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_API_TIMEOUT
