"""Response classes shared by the routers and the app-level handlers."""

from __future__ import annotations

import json
from typing import Any

from fastapi.responses import JSONResponse


class IndentedJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        # four-space indent, UTF-8 kept verbatim
        return json.dumps(content, ensure_ascii=False, allow_nan=False, indent=4).encode("utf-8")
