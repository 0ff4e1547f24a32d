import json
import logging


class KeyValue:
    def __init__(self, key, value):
        self.key = key
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, KeyValue):
            return NotImplemented
        return (self.key, self.value) == (other.key, other.value)

    def __repr__(self):
        return f'KeyValue({self.key!r}, {self.value!r})'


def build_body(pairs):
    """Collect key/value pairs into a JSON object, later keys win."""
    body = {}
    for kv in pairs:
        body[kv.key] = kv.value
    return body


class Request:
    JSON_CT = 'application/json'

    def __init__(self, method, url, body=None):
        self.method = method
        self.url = url
        self.body = body
        self.headers = {}
        self.content = None

        if self.body is not None:
            self.content = json.dumps(self.body).encode('utf-8')
            self.headers['Content-Type'] = self.JSON_CT
        logging.info(f'request built: {self}')

    @classmethod
    def get(cls, url):
        return cls('GET', url)

    @classmethod
    def post(cls, url, pairs):
        return cls('POST', url, body=build_body(pairs))

    def __str__(self):
        if self.content is None:
            return f'{self.method} {self.url}'
        return f'{self.method} {self.url} {self.content.decode("utf-8")}'
