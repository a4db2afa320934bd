from typing import Optional

from sqlalchemy import delete
from sqlmodel import Session, select

from chirpy.models.user import User
from chirpy.schemas.user import UserOut


def to_user_out(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        email=user.email,
        is_chirpy_red=user.is_chirpy_red,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def get_user(session: Session, user_id: str) -> Optional[User]:
    return session.get(User, user_id)


def get_user_by_email(session: Session, email: str) -> Optional[User]:
    return session.exec(select(User).where(User.email == email)).first()


def create_user(session: Session, email: str, hashed_password: str) -> User:
    user = User(email=email, hashed_password=hashed_password)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def update_user(
    session: Session,
    user: User,
    email: Optional[str] = None,
    hashed_password: Optional[str] = None,
) -> User:
    if email is not None and email != user.email:
        existing = get_user_by_email(session, email)
        if existing and existing.id != user.id:
            raise ValueError('Email already registered')
        user.email = email
    if hashed_password is not None:
        user.hashed_password = hashed_password

    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def upgrade_to_chirpy_red(session: Session, user_id: str) -> Optional[User]:
    user = get_user(session, user_id)
    if not user:
        return None
    user.is_chirpy_red = True
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def delete_all_users(session: Session) -> int:
    result = session.execute(delete(User))
    session.commit()
    return result.rowcount
