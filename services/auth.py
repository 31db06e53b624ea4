import asyncio
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from db import session_commit, session_rollback
from exceptions.auth import InvalidTokenException
from exceptions.user import PasswordMismatchException, UserAlreadyExistsException, InvalidCredentialsException
from models.user import UserDTO, UserPublicDTO, RegisterDTO, LoginDTO, AuthResultDTO
from repositories.user import UserRepository
from utils.security import get_password_hasher, get_token_signer

logger = logging.getLogger(__name__)


class AuthService:

    @staticmethod
    def _issue_auth_result(user: UserDTO) -> AuthResultDTO:
        access_token = get_token_signer().issue_token({"userId": user.id, "login": user.login})
        return AuthResultDTO(
            access_token=access_token,
            user=UserPublicDTO.model_validate(user.model_dump(exclude={"password"}))
        )

    @staticmethod
    async def register(register_dto: RegisterDTO, session: AsyncSession) -> AuthResultDTO:
        """
        Register a new user and log them in.

        Raises:
            PasswordMismatchException: password != confirmPassword (checked before any query)
            UserAlreadyExistsException: login is taken
        """
        if register_dto.password != register_dto.confirm_password:
            raise PasswordMismatchException()

        existing_user = await UserRepository.get_by_login(register_dto.login, session)
        if existing_user is not None:
            raise UserAlreadyExistsException(register_dto.login)

        # bcrypt is CPU-bound, keep it off the event loop
        hashed_password = await asyncio.to_thread(get_password_hasher().hash, register_dto.password)

        try:
            user = await UserRepository.create(UserDTO(
                login=register_dto.login,
                password=hashed_password,
                city=register_dto.city,
                street=register_dto.street,
                house_number=register_dto.house_number,
                payment_method=register_dto.payment_method,
            ), session)
            await session_commit(session)
        except IntegrityError:
            # A concurrent registration won the race between the pre-check and the insert
            await session_rollback(session)
            logger.warning(f"[Auth] Unique constraint hit while registering login '{register_dto.login}'")
            raise UserAlreadyExistsException(register_dto.login)

        logger.info(f"[Auth] Registered user {user.id} ({user.login})")
        return AuthService._issue_auth_result(user)

    @staticmethod
    async def login(login_dto: LoginDTO, session: AsyncSession) -> AuthResultDTO:
        user = await UserRepository.get_by_login(login_dto.login, session)
        if user is None:
            logger.info(f"[Auth] Login failed: unknown login '{login_dto.login}'")
            raise InvalidCredentialsException(login_dto.login)

        is_password_valid = await asyncio.to_thread(get_password_hasher().verify, login_dto.password, user.password)
        if not is_password_valid:
            logger.info(f"[Auth] Login failed: wrong password for '{login_dto.login}'")
            raise InvalidCredentialsException(login_dto.login)

        return AuthService._issue_auth_result(user)

    @staticmethod
    async def get_user_by_id(user_id: int, session: AsyncSession) -> UserPublicDTO | None:
        user = await UserRepository.get_by_id(user_id, session)
        if user is None:
            return None
        return UserPublicDTO.model_validate(user.model_dump(exclude={"password"}))

    @staticmethod
    async def validate_user(user_id: int, session: AsyncSession) -> UserPublicDTO | None:
        return await AuthService.get_user_by_id(user_id, session)

    @staticmethod
    async def authenticate_token(token: str, session: AsyncSession) -> UserPublicDTO | None:
        """Resolve a bearer token to its user. Returns None for any bad or stale token."""
        try:
            claims = get_token_signer().verify_token(token)
        except InvalidTokenException as e:
            logger.debug(f"[Auth] Rejected bearer token: {e.reason}")
            return None
        return await AuthService.validate_user(claims["userId"], session)
