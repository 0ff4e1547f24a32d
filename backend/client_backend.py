import asyncio
import logging
import sys

import aiohttp
from tqdm import tqdm

from backend.errors import TransportFailure
from backend.http_dict import HeaderDict
from backend.query import Request
from backend.response import Response
from definitions import ACCEPT, USER_AGENT


class Client:
    CHUNK = 64 * 1024

    def __init__(self, timeout=None, show_progress=False,
                 progress_file=None):
        self.timeout = timeout
        self.show_progress = show_progress
        self.progress_file = progress_file or sys.stderr
        self.session = None

    async def __aenter__(self):
        # proxy environment variables are ignored (trust_env=False)
        self.session = aiohttp.ClientSession(
            headers={'Accept': ACCEPT, 'User-Agent': USER_AGENT},
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            trust_env=False,
        )
        logging.info('session opened')
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()
        return False

    async def disconnect(self):
        if self.session is not None and not self.session.closed:
            await self.session.close()
            logging.info('session closed')
        self.session = None

    async def request(self, req: Request) -> Response:
        if self.session is None:
            logging.error('No session opened')
            raise ConnectionError('Not connected')
        logging.info(f'got request to send: {req}')
        try:
            async with self.session.request(req.method, req.url,
                                            data=req.content,
                                            headers=req.headers) as res:
                logging.info(f'response received: {res.status} {req.url}')
                body = await self.read_body(res)
                response = Response(
                    res.status, res.reason,
                    headers=HeaderDict(res.headers.items()),
                    body=body,
                    version=self.format_version(res.version),
                    url=str(res.url),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            logging.exception(f'request to {req.url} failed')
            reason = str(e) or type(e).__name__
            raise TransportFailure(req.url, reason) from e
        logging.info(f'response read: {response}')
        return response

    async def read_body(self, res):
        length = res.content_length
        if not self.show_progress or not length:
            return await res.read()
        chunks = []
        with tqdm(total=length, unit='B', unit_scale=True,
                  file=self.progress_file, leave=False) as progress:
            async for chunk in res.content.iter_chunked(self.CHUNK):
                chunks.append(chunk)
                progress.update(len(chunk))
        return b''.join(chunks)

    @staticmethod
    def format_version(version):
        if version is None:
            return 'HTTP/1.1'
        return f'HTTP/{version.major}.{version.minor}'
