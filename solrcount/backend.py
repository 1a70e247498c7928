import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .errors import BackendQueryRejected, BackendUnavailable
from .models import BackendConfig, SelectResponse

logger = logging.getLogger(__name__)


class SolrClient:
    """
    A client bound to one Solr core. It is cheap to build and is meant to be
    created for a single request and discarded afterwards.
    """

    def __init__(self, config: BackendConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        if not config.host:
            raise BackendUnavailable(message="Invalid hostname (must be length >= 1)")
        if config.port <= 0 or config.port > 65535:
            raise BackendUnavailable(message="Invalid port (must be 1..65535)", host=config.host)
        if not config.core:
            raise BackendUnavailable(message="Invalid core name (must be length >= 1)",
                                     host=config.host, port=config.port)

        self.config = config
        self.url = f"http://{config.host}:{config.port}/solr/{config.core}"
        self.transport = transport

    def select_url(self, raw_query: str) -> str:
        url = self.url + "/select?wt=json"
        if raw_query:
            url += "&" + raw_query
        return url

    async def select_raw(self, raw_query: str) -> SelectResponse:
        """
        Runs an already escaped query string against the select handler.

        Parameters:
        raw_query (str): The query string exactly as the caller sent it. It is
        appended to the request url without decoding. httpx still percent-encodes
        characters that are not legal in a url query (`"` goes out as `%22`),
        which Solr decodes back to the same text; existing escapes are kept.

        Returns:
        SelectResponse: The status, query time and hit count reported by Solr.

        Raises:
        BackendUnavailable: If Solr cannot be reached.
        BackendQueryRejected: If Solr refuses the query or its reply cannot be read.
        """
        url = self.select_url(raw_query)
        logger.debug(f"Forwarding query to {url}")

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.config.timeout) as client:
                res = await client.get(url)
        except httpx.TransportError as e:
            logger.warning(f"Backend {self.config.host}:{self.config.port} unreachable: {e}")
            raise BackendUnavailable(message=f"Could not reach Solr: {e}",
                                     host=self.config.host, port=self.config.port) from e

        if res.is_error:
            message = _error_message(res) or f"Solr answered with HTTP {res.status_code}"
            logger.warning(f"Query rejected: {message}")
            raise BackendQueryRejected(message=message, query=raw_query)

        try:
            return SelectResponse.model_validate_json(res.content)
        except ValidationError as e:
            message = _error_message(res) or f"Unexpected response from Solr: {e.error_count()} invalid field(s)"
            logger.warning(f"Query rejected: {message}")
            raise BackendQueryRejected(message=message, query=raw_query) from e


def _error_message(res: httpx.Response):
    try:
        body = res.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict) and error.get("msg"):
        return str(error["msg"])
    return None
