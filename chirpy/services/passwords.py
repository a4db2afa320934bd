from loguru import logger
from passlib.context import CryptContext

# bcrypt only reads the first 72 bytes of a secret.
MAX_PASSWORD_BYTES = 72

pwd_context = CryptContext(schemes=['bcrypt'], deprecated='auto', bcrypt__truncate_error=True)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
        return False
    try:
        return pwd_context.verify(password, hashed_password)
    except ValueError:
        logger.warning('auth.password.unrecognized_hash')
        return False
