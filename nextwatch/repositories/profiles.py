from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain.errors import DuplicateIdentity
from nextwatch.domain.models import UserProfile
from nextwatch.domain.records import UserProfileRecord
from nextwatch.repositories.rows import profile_record


class ProfileRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, user_id: int) -> bool:
        found = await self._session.scalar(select(UserProfile.id).where(UserProfile.id == user_id))
        return found is not None

    async def identity_taken(self, username: str, email: str) -> bool:
        found = await self._session.scalar(
            select(UserProfile.id).where(
                or_(UserProfile.username == username, UserProfile.email == email)
            )
        )
        return found is not None

    async def create(self, username: str, email: str) -> UserProfileRecord:
        """Insert a profile. A unique violation surfaces as DuplicateIdentity."""
        row = UserProfile(username=username, email=email)
        self._session.add(row)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicateIdentity("Username or email already registered") from exc
        return profile_record(row)
