import json
import logging
import re

from rich.color import ColorSystem
from rich.console import Console
from rich.text import Text

from backend.errors import BodyReadFailure, MalformedJsonBody
from backend.response import Response

COLOR_SYSTEMS = {
    'standard': ColorSystem.STANDARD,
    '256': ColorSystem.EIGHT_BIT,
    'truecolor': ColorSystem.TRUECOLOR,
    'windows': ColorSystem.WINDOWS,
}

JSON_TOKEN = re.compile(r'"(?:[^"\\]|\\.)*"|[{}\[\],:]|[^\s{}\[\],:"]+')


class Writer:
    """Output capabilities the renderer needs from a terminal."""

    def notice(self, text):
        raise NotImplementedError

    def status(self, text):
        raise NotImplementedError

    def header(self, name, value):
        raise NotImplementedError

    def blank(self):
        raise NotImplementedError

    def body(self, text):
        raise NotImplementedError

    def line(self, text):
        raise NotImplementedError


class ConsoleWriter(Writer):
    NOTICE = 'bold red'
    STATUS = 'blue'
    HEADER_NAME = 'green'
    HEADER_VALUE = 'cyan'
    BODY = 'cyan'

    def __init__(self, console=None, no_color=False):
        self.console = console or Console(no_color=no_color,
                                          highlight=False)

    def _print(self, text):
        self.console.print(text, soft_wrap=True, highlight=False)

    def notice(self, text):
        self._print(Text(text, style=self.NOTICE))

    def status(self, text):
        self._print(Text(text, style=self.STATUS))

    def header(self, name, value):
        self._print(Text.assemble((name, self.HEADER_NAME), ': ',
                                  (value, self.HEADER_VALUE)))

    def blank(self):
        self._print(Text(''))

    def body(self, text):
        # bypasses rich rendering, tabs and carriage returns are kept
        color_system = COLOR_SYSTEMS.get(self.console.color_system)
        if color_system is not None and not self.console.no_color:
            style = self.console.get_style(self.BODY)
            text = style.render(text, color_system=color_system)
        self.console.file.write(text + '\n')
        self.console.file.flush()

    def line(self, text):
        self._print(Text(text))


class Renderer:
    INDENT = 2

    def __init__(self, writer: Writer):
        self.writer = writer

    def render(self, res: Response):
        status = f'{res.status} {res.reason}'.rstrip()
        if res.is_client_error():
            self.writer.notice(f'Error Client Status: {status}')
        if res.is_server_error():
            self.writer.notice(f'Error Server Status: {status}')

        self.writer.status(res.status_line)
        for name, value in res.headers.items():
            self.writer.header(name, value)
        self.writer.blank()

        try:
            text = res.text()
        except BodyReadFailure as e:
            self.writer.line(f'Failed to read response body: {e}')
            return
        self.writer.body(self.format_body(res, text))

    def format_body(self, res: Response, text):
        if not res.is_json() or not text.strip():
            return text
        try:
            json.loads(text)
        except ValueError as e:
            logging.exception(f'malformed json body from {res.url}')
            raise MalformedJsonBody(res.url, res.status, e) from e
        return self.reindent(text)

    def reindent(self, text):
        """Lay out a valid JSON document, keeping every token as received."""
        pad = ' ' * self.INDENT
        tokens = JSON_TOKEN.findall(text)
        out = []
        depth = 0
        for i, tok in enumerate(tokens):
            if tok in ('{', '['):
                out.append(tok)
                if i + 1 < len(tokens) and tokens[i + 1] in ('}', ']'):
                    continue
                depth += 1
                out.append('\n' + pad * depth)
            elif tok in ('}', ']'):
                if tokens[i - 1] in ('{', '['):
                    out.append(tok)
                    continue
                depth -= 1
                out.append('\n' + pad * depth + tok)
            elif tok == ',':
                out.append(',\n' + pad * depth)
            elif tok == ':':
                out.append(': ')
            else:
                out.append(tok)
        return ''.join(out)
