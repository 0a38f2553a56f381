"""
Helpers for keeping customer data and credentials out of logs.
"""

from typing import Optional


def mask_email(email: Optional[str]) -> str:
    """
    Mask an email address for display purposes.

    Args:
        email: The email address to mask.

    Returns:
        Masked email (e.g., "t***@example.com").
    """
    if not email or "@" not in email:
        return "***"

    local, domain = email.rsplit("@", 1)

    if len(local) <= 1:
        masked_local = "*"
    else:
        masked_local = local[0] + "*" * (len(local) - 1)

    return f"{masked_local}@{domain}"


def mask_secret(secret: Optional[str], visible_chars: int = 4) -> str:
    """
    Mask an API key, showing only the last few characters.

    Args:
        secret: The key to mask.
        visible_chars: Number of trailing characters left visible.

    Returns:
        Masked key (e.g., "****wxyz").
    """
    if not secret:
        return ""
    if len(secret) <= visible_chars:
        return "*" * len(secret)
    return "*" * (len(secret) - visible_chars) + secret[-visible_chars:]
