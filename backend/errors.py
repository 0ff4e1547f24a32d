class HttpeekError(Exception):
    """Base class for every failure reported to the user."""


class InvalidUrl(HttpeekError, ValueError):
    def __init__(self, url):
        self.url = url
        super().__init__(f'URL must start with http:// or https://: {url}')


class InvalidKeyValue(HttpeekError, ValueError):
    def __init__(self, token):
        self.token = token
        super().__init__(
            f'Key value pair must be in the format key=value: {token}')


class FileNotFound(HttpeekError, ValueError):
    def __init__(self, path):
        self.path = path
        super().__init__(f'File not found: {path}')


class SourceReadFailure(HttpeekError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f'Failed to read {path}: {reason}')


class TransportFailure(HttpeekError):
    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        super().__init__(f'Request to {url} failed: {reason}')


class BodyReadFailure(HttpeekError):
    pass


class MalformedJsonBody(HttpeekError):
    def __init__(self, url, status, reason):
        self.url = url
        self.status = status
        self.reason = reason
        super().__init__(
            f'Response from {url} ({status}) declares application/json '
            f'but the body is not valid JSON: {reason}')
