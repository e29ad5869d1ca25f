import os
from dotenv import load_dotenv

load_dotenv()

# --- Azure AD app (client credentials) ---
TENANT_ID = os.getenv("TENANT_ID", "")
CLIENT_ID = os.getenv("CLIENT_ID", "")
CLIENT_SECRET = os.getenv("CLIENT_SECRET", "")

# --- Delegated token (skips the client-credentials grant when set) ---
GRAPH_ACCESS_TOKEN = (os.getenv("GRAPH_ACCESS_TOKEN") or "").strip()

# --- Microsoft Graph ---
GRAPH_BASE_URL = (os.getenv("GRAPH_BASE_URL") or "https://graph.microsoft.com/v1.0").strip().rstrip("/")
GRAPH_USER = (os.getenv("GRAPH_USER") or "").strip()  # mailbox owning the contacts; empty -> /me
TOKEN_SCOPE = os.getenv("TOKEN_SCOPE", "https://graph.microsoft.com/.default")

# --- HTTP ---
HTTP_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", "30"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
