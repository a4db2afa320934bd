from sqlalchemy import event
from sqlmodel import Session, create_engine
from chirpy.core.config import settings


def _connect_args(url: str) -> dict:
    if url.startswith('sqlite'):
        return {'check_same_thread': False}
    return {}


engine = create_engine(settings.DB_URL, pool_pre_ping=True, connect_args=_connect_args(settings.DB_URL))


@event.listens_for(engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, _):
    if engine.dialect.name != 'sqlite':
        return
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


def get_session():
    with Session(engine) as session:
        yield session
