"""Page decoders for JSON and msgpack collection documents."""

from pagedlist.codec.schemas import CollectionDocument, LinkObject
from pagedlist.codec.document_decoder import DocumentPageDecoder, convert_element
from pagedlist.codec.json_decoder import JsonPageDecoder
from pagedlist.codec.msgpack_decoder import MsgpackPageDecoder

__all__ = [
    "CollectionDocument",
    "LinkObject",
    "DocumentPageDecoder",
    "convert_element",
    "JsonPageDecoder",
    "MsgpackPageDecoder",
]
