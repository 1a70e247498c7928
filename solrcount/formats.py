import xml.etree.ElementTree as ET
from typing import Callable, Dict, NamedTuple

from .errors import SerializationFailure
from .models import ProxyResult

MIME_TSV = "text/tab-separated-values; charset=utf-8"
MIME_XML = "application/xml; charset=utf-8"
MIME_JSON = "application/json; charset=utf-8"
MIME_TEXT = "text/plain; charset=utf-8"


class Format(NamedTuple):
    serialize: Callable[[ProxyResult], str]
    media_type: str


def to_text(result: ProxyResult) -> str:
    return f"{result.count}\n"


def to_tsv(result: ProxyResult) -> str:
    return f"{result.status}\t{result.qtime}\t{result.query_string}\t{result.count}\n"


def to_xml(result: ProxyResult) -> str:
    root = ET.Element("response")
    for tag, value in result.model_dump(by_alias=True).items():
        ET.SubElement(root, tag).text = str(value)
    return ET.tostring(root, encoding="unicode")


def to_json(result: ProxyResult) -> str:
    return result.model_dump_json(by_alias=True)


DEFAULT_FORMAT = Format(to_json, MIME_JSON)

# Keys are compared verbatim against the Accept header, no wildcards or q-values.
FORMATS: Dict[str, Format] = {
    "text/plain": Format(to_text, MIME_TEXT),
    "text/tab-separated-values": Format(to_tsv, MIME_TSV),
    "application/xml": Format(to_xml, MIME_XML),
}


def negotiate(accept) -> Format:
    return FORMATS.get(accept, DEFAULT_FORMAT)


def render(result: ProxyResult, accept=None):
    """Returns the encoded body and its content type for the given Accept header."""
    fmt = negotiate(accept)
    try:
        return fmt.serialize(result), fmt.media_type
    except (ValueError, TypeError) as e:
        raise SerializationFailure(message=str(e), media_type=fmt.media_type) from e
