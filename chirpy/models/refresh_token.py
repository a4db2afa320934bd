from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlmodel import Field, SQLModel
from chirpy.models.base import TimestampModel


class RefreshToken(TimestampModel, SQLModel, table=True):
    __tablename__ = 'refresh_tokens'

    token: str = Field(primary_key=True, max_length=64)
    user_id: str = Field(
        sa_column=Column(String, ForeignKey('users.id', ondelete='CASCADE'), index=True, nullable=False)
    )
    expires_at: datetime = Field(sa_type=DateTime(timezone=True), sa_column_kwargs={'nullable': False})
    revoked_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
