import asyncio
import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from . import __version__
from .backend import SolrClient
from .errors import BackendQueryRejected, BackendUnavailable, SerializationFailure, SolrCountError
from .formats import render
from .models import BackendConfig, ProxyResult

logger = logging.getLogger(__name__)

SERVICE_NAME = "solrcount"

STATUS_CODES = {
    BackendUnavailable: 500,
    BackendQueryRejected: 400,
    SerializationFailure: 500,
}


def status_for(error: SolrCountError) -> int:
    for cls, code in STATUS_CODES.items():
        if isinstance(error, cls):
            return code
    return 500


class ProxyController:

    def __init__(self, config: BackendConfig, concurrency: Optional[int] = None, client_factory=SolrClient):
        self.config = config
        self.client_factory = client_factory
        self.limit = asyncio.Semaphore(concurrency or os.cpu_count() or 1)
        self.app = FastAPI(title=SERVICE_NAME, version=__version__)
        self.app.get("/proxy")(self.handle_proxy)
        self.app.get("/")(self.handle_root)
        self.app.get("/{path:path}")(self.handle_root)


    async def handle_root(self):
        return PlainTextResponse(f"{SERVICE_NAME} {__version__}, go to: /proxy?q=*:*\n")


    async def handle_proxy(self, request: Request):
        raw_query = request.url.query
        try:
            result = await self.query(raw_query)
            body, media_type = render(result, request.headers.get("accept"))
        except SolrCountError as e:
            return PlainTextResponse(f"{e}\n", status_code=status_for(e))

        return Response(content=body, media_type=media_type)


    async def query(self, raw_query: str) -> ProxyResult:
        async with self.limit:
            client = self.client_factory(self.config)
            res = await client.select_raw(raw_query)

        return ProxyResult(
            status=res.header.status,
            qtime=res.header.qtime,
            query_string=raw_query,
            count=res.response.num_found,
        )


    def run(self, host: str = '0.0.0.0', port: int = 18080):
        import uvicorn
        logger.info(f"Proxying {self.config.host}:{self.config.port}/solr/{self.config.core} on {host}:{port}")
        uvicorn.run(self.app, host=host, port=port)
