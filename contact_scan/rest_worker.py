import logging
import requests
from typing import Optional
from .config import GRAPH_BASE_URL, GRAPH_USER, HTTP_TIMEOUT
from .errors import RemoteCreateError
from .pipeline.contact import ContactRecord, build_contact_record

logger = logging.getLogger(__name__)


def contacts_url(user: str = GRAPH_USER, base_url: str = GRAPH_BASE_URL) -> str:
    """Contacts collection of the configured mailbox, or of the signed-in user."""
    if user:
        return f"{base_url}/users/{user}/contacts"
    return f"{base_url}/me/contacts"


def create_contact_on_graph(token: str, display_name: str, email: str, phone: str,
                            url: Optional[str] = None, timeout: int = HTTP_TIMEOUT) -> ContactRecord:
    """Create one Outlook contact; a single POST, no retry."""
    url = url or contacts_url()
    record = build_contact_record(display_name, email, phone)
    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }
    try:
        resp = requests.post(url, headers=headers, json=record.payload(), timeout=timeout)
    except requests.RequestException as e:
        raise RemoteCreateError(None, f"Network error calling {url}: {e}") from e
    if not resp.ok:
        raise RemoteCreateError(resp.status_code, resp.text)
    logger.info("Contact created: status=%s", resp.status_code)
    return ContactRecord.model_validate(resp.json())
