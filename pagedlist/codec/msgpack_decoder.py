"""msgpack page decoder."""

from __future__ import annotations

from typing import Any

import msgpack

from pagedlist.codec.document_decoder import DocumentPageDecoder


class MsgpackPageDecoder(DocumentPageDecoder):
    """Decodes collection documents packed with msgpack."""

    format_name = "msgpack"

    def _load(self, raw: bytes) -> Any:
        return msgpack.unpackb(raw, raw=False)
