"""User Repository — SQLAlchemy implementation of UserRepository.

Invariants:
    - Read-only: never writes or commits
    - Returns UserRecord (core type), never the ORM object
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from invoicing.core.repository_protocols import UserRecord
from invoicing.infrastructure.database import to_database_error
from invoicing.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> UserRecord | None:
        try:
            result = await self.db.execute(select(User).where(User.email == email))
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed: {e}", extra={"operation": "select"})
            raise to_database_error(e, "select") from e
        user = result.scalar_one_or_none()
        if user is None:
            return None
        return UserRecord(
            id=str(user.id), name=user.name,
            email=user.email, password_hash=user.password,
        )
