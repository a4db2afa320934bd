from sqlmodel import Field, SQLModel
from chirpy.models.base import IDModel, TimestampModel


class User(IDModel, TimestampModel, SQLModel, table=True):
    __tablename__ = 'users'

    email: str = Field(index=True, unique=True)
    hashed_password: str
    is_chirpy_red: bool = False
