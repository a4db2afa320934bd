from sqlmodel import SQLModel
from chirpy.db.session import engine
from chirpy.core.config import settings
from chirpy.models import chirp, refresh_token, user  # noqa: F401


def init_db(drop_all: bool = False) -> None:
    if drop_all:
        SQLModel.metadata.drop_all(engine)
    if settings.DB_URL.startswith('sqlite') or settings.ENV != 'production' or settings.AUTO_CREATE_TABLES:
        SQLModel.metadata.create_all(engine)
