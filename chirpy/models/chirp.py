from sqlalchemy import Column, ForeignKey, String
from sqlmodel import Field, SQLModel
from chirpy.models.base import IDModel, TimestampModel


class Chirp(IDModel, TimestampModel, SQLModel, table=True):
    __tablename__ = 'chirps'

    body: str
    user_id: str = Field(
        sa_column=Column(String, ForeignKey('users.id', ondelete='CASCADE'), index=True, nullable=False)
    )
