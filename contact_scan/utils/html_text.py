"""Markup to plain text for the signature/phone heuristics.

Regex only, no parser: tags become line breaks, four entities are decoded and
blank lines are collapsed. Malformed markup still yields some text.
"""

import logging
import re
from typing import Optional

from ..models import RawBody

logger = logging.getLogger(__name__)

_STYLE_RE = re.compile(r"<style[\s\S]*?</style>", re.IGNORECASE)
_SCRIPT_RE = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_MULTI_NL_RE = re.compile(r"\n{2,}")

# decoded in this order; &amp;lt; therefore ends up as "<"
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
)


def html_to_text(html: str) -> str:
    s = _STYLE_RE.sub("", html)
    s = _SCRIPT_RE.sub("", s)
    s = _TAG_RE.sub("\n", s)
    for entity, char in _ENTITIES:
        s = s.replace(entity, char)
    s = _MULTI_NL_RE.sub("\n", s)
    return s.strip()


def read_body(html: Optional[str]) -> RawBody:
    """Wrap a message body as RawBody.

    If conversion fails the raw body is used as its own text, so extraction
    still runs (on noisier input) instead of aborting the scan.
    """
    raw = html if html is not None else ""
    try:
        text = html_to_text(raw)
    except Exception as e:
        logger.debug("html_to_text failed, using raw body as text: %r", e)
        if isinstance(raw, (bytes, bytearray)):
            text = raw.decode("utf-8", errors="replace")
        else:
            text = raw if isinstance(raw, str) else str(raw)
    return RawBody(html=raw, text=text)
