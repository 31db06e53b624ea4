"""
Registration, login and profile endpoints.

register and login answer 201 with {data: {access_token, user}, message}.
The user object never carries the password digest.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from exceptions import CoffeeHouseException
from models.user import RegisterDTO, LoginDTO, UserPublicDTO
from services.auth import AuthService
from utils.error_handler import handle_service_error, handle_unexpected_error
from web.dependencies import get_session, get_current_user
from web.responses import envelope

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(register_dto: RegisterDTO, session: AsyncSession = Depends(get_session)):
    try:
        auth_result = await AuthService.register(register_dto, session)
    except CoffeeHouseException as e:
        raise handle_service_error(e, "Registration failed")
    except Exception as e:
        raise handle_unexpected_error(e, "Registration failed")
    return envelope(data=auth_result, message="User registered successfully")


@auth_router.post("/login", status_code=status.HTTP_201_CREATED)
async def login(login_dto: LoginDTO, session: AsyncSession = Depends(get_session)):
    try:
        auth_result = await AuthService.login(login_dto, session)
    except CoffeeHouseException as e:
        raise handle_service_error(e, "Login failed")
    except Exception as e:
        raise handle_unexpected_error(e, "Login failed")
    return envelope(data=auth_result, message="Login successful")


@auth_router.get("/profile")
async def get_profile(user: UserPublicDTO = Depends(get_current_user)):
    return envelope(data=user)
