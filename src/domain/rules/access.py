"""
Derived access properties.

Every read site goes through these so expiration, blocking and display names
are computed identically everywhere.
"""

import re
from datetime import UTC, datetime
from typing import Optional

from src.domain.entities import Membership, Organization, Profile


def is_subscription_expired(
    organization: Organization, now: Optional[datetime] = None
) -> bool:
    """Expired iff an end date exists and lies in the past"""
    end = organization.subscription_end_date
    if end is None:
        return False
    if now is None:
        now = datetime.now(UTC)
    # Stored timestamps are naive UTC
    if end.tzinfo is None:
        end = end.replace(tzinfo=UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return end < now


def effective_block(
    membership: Optional[Membership], organization: Organization
) -> bool:
    """Membership block OR organization block; the default tenant is never blocked"""
    if organization.is_default:
        return False
    membership_blocked = membership.is_blocked if membership is not None else False
    return membership_blocked or organization.is_blocked


def display_name(email: str, profile: Optional[Profile] = None) -> str:
    """Profile full name, else a title-cased email local part"""
    if profile is not None and profile.full_name:
        return profile.full_name
    local_part = email.split("@")[0]
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), re.sub(r"[._]", " ", local_part))
