from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from db import session_execute, session_flush
from models.user import UserDTO, User


class UserRepository:
    @staticmethod
    async def get_by_login(login: str, session: AsyncSession) -> UserDTO | None:
        stmt = select(User).where(User.login == login)
        user = await session_execute(stmt, session)
        user = user.scalar()
        if user is not None:
            return UserDTO.model_validate(user, from_attributes=True)
        else:
            return user

    @staticmethod
    async def get_by_id(user_id: int, session: AsyncSession) -> UserDTO | None:
        stmt = select(User).where(User.id == user_id)
        user = await session_execute(stmt, session)
        user = user.scalar()
        if user is not None:
            return UserDTO.model_validate(user, from_attributes=True)
        else:
            return user

    @staticmethod
    async def create(user_dto: UserDTO, session: AsyncSession) -> UserDTO:
        """
        Insert a user and return it with id and created_at populated.

        Raises sqlalchemy.exc.IntegrityError when the login is already taken.
        """
        user_dict = user_dto.model_dump(exclude_none=True)
        user = User(**user_dict)
        session.add(user)
        await session_flush(session)
        await session.refresh(user)
        return UserDTO.model_validate(user, from_attributes=True)
