from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from sqlalchemy import Column, Integer, DateTime, String, func, CheckConstraint
from sqlalchemy import Enum as SQLEnum

from enums.payment_method import PaymentMethod
from models.base import Base

LOGIN_PATTERN = r"^[A-Za-z][A-Za-z0-9]*$"


class User(Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    login = Column(String(50), nullable=False, unique=True)
    # bcrypt digest, never the plaintext
    password = Column(String, nullable=False)
    city = Column(String, nullable=False)
    street = Column(String, nullable=False)
    house_number = Column(Integer, nullable=False)
    payment_method = Column(SQLEnum(PaymentMethod), nullable=False, default=PaymentMethod.CASH)
    created_at = Column(DateTime, default=func.now())

    __table_args__ = (
        CheckConstraint('house_number >= 1', name='check_house_number_positive'),
    )


class UserDTO(BaseModel):
    """Internal user record, carries the password digest. Never serialize it to clients."""
    id: int | None = None
    login: str | None = None
    password: str | None = None
    city: str | None = None
    street: str | None = None
    house_number: int | None = None
    payment_method: PaymentMethod | None = None
    created_at: datetime | None = None


class UserPublicDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    login: str
    city: str
    street: str
    house_number: int
    payment_method: PaymentMethod
    created_at: datetime | None = None


class RegisterDTO(BaseModel):
    """Body of POST /auth/register."""
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    login: str = Field(..., min_length=3, max_length=50, pattern=LOGIN_PATTERN,
                       description="Starts with a letter, English letters and digits only")
    password: str = Field(..., min_length=6)
    confirm_password: str = Field(..., min_length=6)
    city: str = Field(..., min_length=1)
    street: str = Field(..., min_length=1)
    house_number: int = Field(..., ge=1, strict=True)
    payment_method: PaymentMethod

    @model_validator(mode="after")
    def strip_blank_address(self):
        # "   " passes min_length but is as empty as ""
        for field_name in ("city", "street"):
            if not getattr(self, field_name).strip():
                raise ValueError(f"{to_camel(field_name)} should not be empty")
        return self


class LoginDTO(BaseModel):
    """Body of POST /auth/login."""
    model_config = ConfigDict(extra="forbid")

    login: str = Field(..., min_length=3, max_length=50, pattern=LOGIN_PATTERN)
    password: str = Field(..., min_length=6)


class AuthResultDTO(BaseModel):
    access_token: str
    user: UserPublicDTO
