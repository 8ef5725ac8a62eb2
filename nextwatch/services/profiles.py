"""User profile and guest session lifecycle."""

import logging
import secrets
import string
import time

from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain.errors import DuplicateIdentity
from nextwatch.domain.records import UserProfileRecord
from nextwatch.repositories import ProfileRepository

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase
GUEST_TOKEN_LENGTH = 13


def new_guest_session_id() -> str:
    """Return ``guest_<epoch millis>_<13 random base36 chars>``."""
    token = "".join(secrets.choice(_BASE36) for _ in range(GUEST_TOKEN_LENGTH))
    return f"guest_{int(time.time() * 1000)}_{token}"


class ProfileService:
    """Handles user profile registration."""

    def __init__(self, session: AsyncSession) -> None:
        self._profiles = ProfileRepository(session)

    async def create_profile(self, username: str, email: str) -> UserProfileRecord:
        """Register a new profile. Raises DuplicateIdentity if username or email exists."""
        if await self._profiles.identity_taken(username, email):
            raise DuplicateIdentity("Username or email already registered")

        profile = await self._profiles.create(username, email)
        logger.info("Created user profile id=%d username=%s", profile.id, profile.username)
        return profile

    def create_guest_session(self) -> str:
        session_id = new_guest_session_id()
        logger.info("Issued guest session %s", session_id)
        return session_id
