import argparse

from backend.errors import HttpeekError
from backend.validators import (validate_keyvalue, validate_source,
                                validate_url)
from definitions import SOURCE_STDIN, VERSION


def _converter(validate, name):
    def convert(s):
        try:
            return validate(s)
        except HttpeekError as e:
            raise argparse.ArgumentTypeError(str(e))
    convert.__name__ = name
    return convert


url_type = _converter(validate_url, 'url')
keyvalue_type = _converter(validate_keyvalue, 'key=value')
source_type = _converter(validate_source, 'file')


class AParser:
    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog='httpeek', description='A CLI HTTP client')
        self.parser.add_argument('--version', action='version',
                                 version=f'%(prog)s {VERSION}')
        self.parser.add_argument('-c', '--code', type=int, default=0,
                                 help='Expected response status, exit 1 '
                                      'when it differs (0 disables)')
        self.parser.add_argument('--progress', action='store_true',
                                 help='Show body download progress')

        commands = self.parser.add_subparsers(dest='command',
                                              metavar='command')
        commands.required = True

        get = commands.add_parser('get', help='send GET request')
        get.add_argument('url', type=url_type, help='Url to request')
        get.add_argument('file', type=source_type, nargs='?',
                         default=SOURCE_STDIN,
                         help=f'File with one url per line, "{SOURCE_STDIN}" '
                              f'requests only the url argument')

        post = commands.add_parser('post', help='send POST request with a '
                                                'JSON body')
        post.add_argument('url', type=url_type, help='Url to request')
        post.add_argument('body', type=keyvalue_type, nargs='+',
                          metavar='key=value', help='JSON body fields')

    def parse(self, argv=None):
        return self.parser.parse_args(argv)
