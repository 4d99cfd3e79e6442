"""Shared-secret verification for webhook callers."""

import hmac

from pydantic import SecretStr

# Header carrying the webhook credential.
WEBHOOK_API_KEY_HEADER = "x-api-key"


def verify_webhook_key(presented: str | None, expected: SecretStr | str | None) -> bool:
    """
    Return True only when a secret is configured and the presented value matches it.

    Comparison is constant-time. A missing or blank secret never matches.
    """
    if expected is None:
        return False
    secret = expected.get_secret_value() if isinstance(expected, SecretStr) else expected
    if not secret or not secret.strip() or presented is None:
        return False
    return hmac.compare_digest(presented.encode("utf-8"), secret.encode("utf-8"))
