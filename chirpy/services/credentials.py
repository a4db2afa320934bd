from collections.abc import Mapping

AUTHORIZATION_HEADER = 'Authorization'
BEARER_PREFIX = 'Bearer '
API_KEY_PREFIX = 'ApiKey '


class MissingCredentialError(Exception):
    pass


def _header_value(headers: Mapping[str, str], prefix: str) -> str:
    raw = headers.get(AUTHORIZATION_HEADER)
    if not raw or not raw.startswith(prefix):
        raise MissingCredentialError(f'missing {prefix.strip()} credential')
    value = raw[len(prefix):].strip()
    if not value:
        raise MissingCredentialError(f'missing {prefix.strip()} credential')
    return value


def get_bearer_token(headers: Mapping[str, str]) -> str:
    return _header_value(headers, BEARER_PREFIX)


def get_api_key(headers: Mapping[str, str]) -> str:
    return _header_value(headers, API_KEY_PREFIX)
