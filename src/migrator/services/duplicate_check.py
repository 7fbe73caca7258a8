# migrator/services/duplicate_check.py
"""
Pre-flight check for duplicate user emails.

The identity provider rejects a second identity with an email it already
knows, which aborts the migration midway. Running this check first lists
every email that would trigger that failure.
"""

from collections import Counter
from collections.abc import Iterable

from migrator.models.legacy import LegacyUser


def find_duplicate_emails(users: Iterable[LegacyUser]) -> dict[str, int]:
    """
    Return emails used by more than one legacy user with their counts.

    Comparison is case-insensitive and ignores surrounding whitespace.
    Users without an email are skipped. Emails are returned lowercased,
    in order of first appearance.
    """
    counts = Counter(
        user.email.strip().lower() for user in users if user.email.strip()
    )
    return {email: count for email, count in counts.items() if count > 1}
