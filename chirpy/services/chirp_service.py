from typing import Optional

from sqlmodel import Session, select

from chirpy.models.chirp import Chirp

PROFANE_WORDS = frozenset({'kerfuffle', 'sharbert', 'fornax'})
MASK = '****'


class ChirpTooLongError(ValueError):
    pass


def clean_body(body: str) -> str:
    words = body.split(' ')
    return ' '.join(MASK if word.lower() in PROFANE_WORDS else word for word in words)


def create_chirp(session: Session, user_id: str, body: str, max_len: int) -> Chirp:
    if len(body) > max_len:
        raise ChirpTooLongError('Chirp is too long')
    record = Chirp(body=clean_body(body), user_id=user_id)
    session.add(record)
    session.commit()
    session.refresh(record)
    return record


def list_chirps(
    session: Session,
    author_id: Optional[str] = None,
    descending: bool = False,
) -> list[Chirp]:
    statement = select(Chirp)
    if author_id is not None:
        statement = statement.where(Chirp.user_id == author_id)
    order = Chirp.created_at.desc() if descending else Chirp.created_at.asc()
    statement = statement.order_by(order)
    return list(session.exec(statement).all())


def get_chirp(session: Session, chirp_id: str) -> Optional[Chirp]:
    return session.exec(select(Chirp).where(Chirp.id == chirp_id)).first()


def delete_chirp(session: Session, record: Chirp) -> None:
    session.delete(record)
    session.commit()
