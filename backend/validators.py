import os

from backend.errors import FileNotFound, InvalidKeyValue, InvalidUrl
from backend.query import KeyValue
from definitions import SOURCE_STDIN

SCHEMES = ('http://', 'https://')


def validate_url(s: str) -> str:
    if not s.startswith(SCHEMES):
        raise InvalidUrl(s)
    return s


def validate_keyvalue(s: str) -> KeyValue:
    parts = s.split('=')
    if len(parts) != 2 or not all(parts):
        raise InvalidKeyValue(s)
    key, value = parts
    return KeyValue(key, value)


def validate_source(path: str) -> str:
    # existence is only checked here, reading may still fail later
    if path == SOURCE_STDIN or os.path.exists(path):
        return path
    raise FileNotFound(path)
