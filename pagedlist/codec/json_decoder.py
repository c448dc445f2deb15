"""JSON page decoder."""

from __future__ import annotations

import json
from typing import Any

from pagedlist.codec.document_decoder import DocumentPageDecoder


class JsonPageDecoder(DocumentPageDecoder):
    """Decodes JSON (and JSON:API) collection documents."""

    format_name = "JSON"

    def _load(self, raw: bytes) -> Any:
        return json.loads(raw)
