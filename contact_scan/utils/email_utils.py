from email import message_from_bytes
from email.message import Message
from email.utils import parseaddr
from typing import Tuple, Optional
import html
import logging

from ..errors import BodyRetrievalError
from ..models import SenderIdentity

logger = logging.getLogger(__name__)


def parse_email(raw_bytes: bytes) -> Message:
    return message_from_bytes(raw_bytes)


def _decode_part(part: Message) -> str:
    payload = part.get_payload(decode=True) or b""
    charset = part.get_content_charset() or "utf-8"
    try:
        return payload.decode(charset, errors="replace")
    except LookupError:
        # unknown charset name in the header
        return payload.decode("utf-8", errors="replace")


def extract_bodies(msg: Message) -> Tuple[Optional[str], Optional[str]]:
    """Return (plain_text, html); attachments are skipped."""
    plain, html_body = None, None
    for part in msg.walk():
        if part.is_multipart():
            continue
        if part.get_content_type() == "message/rfc822":
            continue
        disp = str(part.get("Content-Disposition") or "")
        if "attachment" in disp.lower():
            continue
        ctype = part.get_content_type()
        if ctype == "text/plain" and plain is None:
            plain = _decode_part(part)
        elif ctype == "text/html" and html_body is None:
            html_body = _decode_part(part)
    return plain, html_body


def extract_embedded_rfc822(msg: Message) -> Optional[Message]:
    """First embedded original mail (message/rfc822), or None."""
    for part in msg.walk():
        if part.get_content_type() != "message/rfc822":
            continue
        payload = part.get_payload()
        # some clients give a list, others the Message itself
        if isinstance(payload, list) and payload and isinstance(payload[0], Message):
            return payload[0]
        if isinstance(payload, Message):
            return payload
    return None


def get_effective_message(msg: Message) -> Message:
    """Prefer the original mail when it was forwarded as an attachment."""
    inner = extract_embedded_rfc822(msg)
    if inner is not None:
        logger.debug("using embedded message/rfc822 original")
        return inner
    return msg


class EmailMessageSource:
    """Mail item backed by a parsed RFC 822 message.

    get_body() mirrors the host's "body as HTML" coercion: plain-text-only
    mails are escaped so their <addresses> survive tag stripping.
    """

    def __init__(self, msg: Message):
        self.msg = msg

    def get_body(self) -> str:
        try:
            plain, html_body = extract_bodies(self.msg)
        except Exception as e:
            raise BodyRetrievalError(f"Cannot read message body: {e}") from e
        if html_body is not None:
            return html_body
        if plain is not None:
            return html.escape(plain, quote=False)
        raise BodyRetrievalError("Message has no text/plain or text/html body")

    def get_sender(self) -> SenderIdentity:
        name, addr = parseaddr(str(self.msg.get("From") or ""))
        return SenderIdentity(email=addr or "", name=(name or "").strip())
