# cli/core/config.py
from pathlib import Path
import os

# URL of the DNSGate management API
BASE_URL = os.environ.get("DNSGATE_URL", "https://localhost:8000")

# CA certificate for TLS verification (missing file = system trust store)
CA_CERT = os.environ.get("DNSGATE_CA_CERT", str(Path(__file__).parent.parent.parent / "certs" / "ca.crt"))

# Shared secret for the resolver-facing /access endpoints
RESOLVER_KEY = os.environ.get("DNSGATE_RESOLVER_KEY")

# Local state (operator session)
APP_DIR = Path(os.environ.get("DNSGATE_HOME", Path.home() / ".dnsgate"))

SESSION_FILE = APP_DIR / "session.json"
