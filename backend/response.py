import logging

import chardet

from backend.errors import BodyReadFailure
from backend.http_dict import HeaderDict


class Response:
    def __init__(self, status, reason='', headers=None, body=b'',
                 version='HTTP/1.1', url=None):
        self.status = int(status)
        self.reason = reason or ''
        self.headers = headers if headers is not None else HeaderDict()
        self.body = body
        self.version = version
        self.url = url

    @staticmethod
    def parse_content_type(ct):
        if not ct:
            return {}
        vals = {}
        for sub in ct.split(';'):
            sub = sub.strip()
            if not sub:
                continue
            if '=' in sub:
                key, value = sub.split('=', maxsplit=1)
                vals[key.strip().lower()] = value.strip().strip('"')
            elif '/' in sub and 'type' not in vals:
                vals['type'] = sub.lower()
            else:
                return {}
        if 'type' not in vals:
            return {}
        return vals

    def content_type(self):
        return self.parse_content_type(self.headers.get('Content-Type'))

    def is_json(self):
        return self.content_type().get('type') == 'application/json'

    def is_client_error(self):
        return 400 <= self.status < 500

    def is_server_error(self):
        return 500 <= self.status < 600

    @property
    def status_line(self):
        return f'{self.version} {self.status} {self.reason}'.rstrip()

    def text(self):
        encoding = self.content_type().get('charset')
        if not encoding:
            return self.decode(self.body)
        try:
            return self.body.decode(encoding)
        except LookupError:
            logging.warning(f'unknown charset {encoding}, detecting')
            return self.decode(self.body)
        except UnicodeDecodeError as e:
            logging.exception(f'cannot decode body as {encoding}')
            raise BodyReadFailure(e) from e

    @staticmethod
    def decode(b):
        encoding = chardet.detect(b)['encoding'] or 'utf-8'
        try:
            return str(b, encoding)
        except (LookupError, UnicodeDecodeError) as e:
            logging.exception(f'cannot decode body as {encoding}')
            raise BodyReadFailure(e) from e

    def __str__(self):
        return f'{self.status_line} ({len(self.body)} bytes from {self.url})'
