"""
A proxy for Solr requests that only reveals the number of results.

Starting a server:

    $ solrcount -host 10.0.0.1 -port 8080 -core biblio -listen :9999

Querying it:

    $ curl localhost:9999/proxy?q=Hello%20OR%20World
    {"status":0,"qtime":62,"q":"q=Hello%20OR%20World","count":545878}

    $ curl -H 'Accept: text/plain' localhost:9999/proxy?q=Hi
    4216
"""
import argparse
import logging
import os

from . import __version__
from .controller import SERVICE_NAME, ProxyController
from .models import BackendConfig


def parse_listen(value):
    """Splits a `host:port` bind string. An empty host binds every interface."""
    host, sep, port = value.rpartition(":")
    if not sep or not port.isdigit():
        raise argparse.ArgumentTypeError(f"invalid listen address {value!r}, expected host:port")
    port = int(port)
    if port > 65535:
        raise argparse.ArgumentTypeError(f"invalid listen port {port}")
    return host.strip("[]") or "0.0.0.0", port


def build_parser():
    parser = argparse.ArgumentParser(prog=SERVICE_NAME, description="Proxy a Solr core, revealing only result counts.")
    parser.add_argument("-host", "--host", default="localhost", help="host of the SOLR server to proxy")
    parser.add_argument("-port", "--port", type=int, default=8080, help="port of the SOLR server to proxy")
    parser.add_argument("-core", "--core", default="biblio", help="SOLR core name")
    parser.add_argument("-listen", "--listen", type=parse_listen, default=":18080", help="host and port to listen on")
    parser.add_argument("-w", "--workers", type=int, default=os.cpu_count() or 1, help="concurrency level")
    parser.add_argument("--timeout", type=float, default=None, help="seconds to wait for SOLR (default: no limit)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("-v", "--version", action="version", version=f"{SERVICE_NAME} {__version__}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    config = BackendConfig(host=args.host, port=args.port, core=args.core, timeout=args.timeout)
    controller = ProxyController(config, concurrency=args.workers)

    host, port = args.listen
    controller.run(host=host, port=port)
