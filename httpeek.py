import asyncio
import logging
import sys

from argparser import AParser
from backend.client_backend import Client
from backend.errors import HttpeekError
from backend.gate import check_status
from backend.query import Request
from backend.render import ConsoleWriter, Renderer
from backend.source import read_urls
from definitions import SOURCE_STDIN, setup_logging


async def run(args, writer=None, err=None):
    writer = writer or ConsoleWriter()
    renderer = Renderer(writer)

    if args.command == 'post':
        requests = [Request.post(args.url, args.body)]
    elif args.file == SOURCE_STDIN:
        requests = [Request.get(args.url)]
    else:
        urls = read_urls(args.file, err)
        for url in urls:
            writer.line(f'get url is: {url}')
        requests = [Request.get(url) for url in urls]

    async with Client(show_progress=args.progress) as client:
        for req in requests:
            res = await client.request(req)
            renderer.render(res)
            check_status(args.code, res.status)


def main(argv=None):
    setup_logging()
    args = AParser().parse(argv)
    logging.info(args)
    try:
        asyncio.run(run(args))
    except HttpeekError as e:
        logging.exception('request failed')
        sys.stderr.write(f'Error: {e}\n')
        sys.exit(1)


if __name__ == '__main__':
    main()
