import logging
import time
import requests
from typing import Optional
from .config import TENANT_ID, CLIENT_ID, CLIENT_SECRET, TOKEN_SCOPE, GRAPH_ACCESS_TOKEN, HTTP_TIMEOUT
from .errors import TokenAcquisitionError

logger = logging.getLogger(__name__)

SCOPE_HINT = "the app needs the Contacts.ReadWrite permission on Microsoft Graph"


class OAuthTokenProvider:
    """Fetches and caches access tokens for Microsoft Graph.

    A preset delegated token (GRAPH_ACCESS_TOKEN) is returned unchanged;
    otherwise the client-credentials grant is used.
    """

    def __init__(self, tenant_id: str = TENANT_ID, client_id: str = CLIENT_ID,
                 client_secret: str = CLIENT_SECRET, scope: str = TOKEN_SCOPE,
                 static_token: Optional[str] = GRAPH_ACCESS_TOKEN, timeout: int = HTTP_TIMEOUT):
        self.tenant_id = tenant_id
        self.client_id = client_id
        self.client_secret = client_secret
        self.scope = scope
        self.static_token = static_token
        self.timeout = timeout
        self._access_token: Optional[str] = None
        self._expires_at = 0.0

    def get_token(self) -> str:
        if self.static_token:
            return self.static_token
        now = time.time()
        if self._access_token and now < self._expires_at - 60:
            return self._access_token
        self._refresh_token()
        return self._access_token

    def _refresh_token(self) -> None:
        if not (self.tenant_id and self.client_id and self.client_secret):
            raise TokenAcquisitionError(
                f"TENANT_ID, CLIENT_ID and CLIENT_SECRET must be set ({SCOPE_HINT})")
        token_url = f"https://login.microsoftonline.com/{self.tenant_id}/oauth2/v2.0/token"
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "scope": self.scope,
            "grant_type": "client_credentials",
        }
        try:
            resp = requests.post(token_url, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            raise TokenAcquisitionError(f"Network error calling {token_url}: {e}") from e
        if not resp.ok:
            raise TokenAcquisitionError(
                f"Token request failed: {resp.status_code} {resp.text} ({SCOPE_HINT})")
        payload = resp.json()
        token = payload.get("access_token")
        if not token:
            raise TokenAcquisitionError(f"Token response has no access_token ({SCOPE_HINT})")
        self._access_token = token
        self._expires_at = time.time() + int(payload.get("expires_in", 3600))
        logger.debug("Graph token refreshed, expires in %ss", payload.get("expires_in", 3600))
