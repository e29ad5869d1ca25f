import logging

from ..models import ExtractionResult, SenderIdentity
from ..utils.html_text import read_body
from .phone_fr import extract_phone_fr
from .signature_name import guess_full_name

logger = logging.getLogger(__name__)


def scan(raw_html_body: str, sender: SenderIdentity) -> ExtractionResult:
    """Extract name and phone from a mail body; the email is the sender's address as-is."""
    body = read_body(raw_html_body)
    phone = extract_phone_fr(body.text)
    full_name = guess_full_name(body.text, sender.name)
    result = ExtractionResult(full_name=full_name, phone=phone, email=sender.email or "")
    logger.debug("scan: name=%s phone=%s email=%s", bool(full_name), bool(phone), bool(result.email))
    return result


def scan_message(source) -> ExtractionResult:
    """Scan a mail item exposing get_body() and get_sender().

    BodyRetrievalError from the source is not caught here.
    """
    html = source.get_body()
    return scan(html, source.get_sender())
