from __future__ import annotations

import base64

from slugkit.exceptions import CoherenceError


def base64_encode(text: str) -> str:
    """Standard base64 of the UTF-8 bytes of ``text``.

    ``text`` must already be free of lone surrogates (see
    :func:`slugkit.utils.surrogates.sanitize_surrogates`).
    """
    try:
        raw = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise CoherenceError(f"Fallback input is not encodable as UTF-8: {e.reason}") from e
    return base64.b64encode(raw).decode("ascii")
