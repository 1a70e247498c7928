import json
from functools import partial

import httpx
import pytest
from fastapi.testclient import TestClient

from solrcount import BackendConfig, ProxyController
from solrcount.backend import SolrClient


def solr_reply(status=0, qtime=1, num_found=4216):
    return {
        "responseHeader": {"status": status, "QTime": qtime, "params": {"wt": "json"}},
        "response": {"numFound": num_found, "start": 0, "docs": []},
    }


class FakeSolr:
    """Records every request and answers with a canned reply."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = json.dumps(solr_reply())
        self.error = None

    def reply(self, status_code=200, body=None, **kwargs):
        self.status_code = status_code
        self.body = body if body is not None else json.dumps(solr_reply(**kwargs))

    def __call__(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body.encode("utf-8"))


@pytest.fixture
def fake_solr():
    return FakeSolr()


@pytest.fixture
def config():
    return BackendConfig(host="solr.local", port=8983, core="biblio")


@pytest.fixture
def client(fake_solr, config):
    factory = partial(SolrClient, transport=httpx.MockTransport(fake_solr))
    controller = ProxyController(config, concurrency=2, client_factory=factory)
    return TestClient(controller.app)
