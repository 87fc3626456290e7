import requests
from typing import Optional, List
from .config import BASE_URL, CA_CERT, RESOLVER_KEY
import os

# Get verify setting - use CA cert if exists, else True (system certs)
def _get_verify():
    if CA_CERT and os.path.exists(CA_CERT):
        return CA_CERT
    return True  # Use system default

def _auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}

def _resolver_headers() -> dict:
    return {"X-Resolver-Key": RESOLVER_KEY} if RESOLVER_KEY else {}

def api_login(username: str, password: str) -> Optional[str]:
    """
    Logs in to the backend and returns the access token.
    """
    url = f"{BASE_URL}/auth/login"
    data = {"username": username, "password": password}

    try:
        resp = requests.post(url, json=data, verify=_get_verify(), timeout=5)
        if resp.status_code != 200:
            return None
        return resp.json().get("access_token")
    except requests.RequestException:
        return None

def api_logout(token: str) -> bool:
    url = f"{BASE_URL}/auth/logout"
    try:
        resp = requests.post(url, headers=_auth_headers(token), verify=_get_verify(), timeout=5)
        return resp.status_code == 200
    except requests.RequestException:
        return False

def api_create_account(token: str, account_data: dict) -> Optional[dict]:
    """
    Creates an account and returns its summary, including the new token.
    """
    url = f"{BASE_URL}/accounts"
    try:
        resp = requests.post(url, json=account_data, headers=_auth_headers(token), verify=_get_verify(), timeout=10)
        if resp.status_code != 201:
            return None
        return resp.json()
    except requests.RequestException:
        return None

def api_list_accounts(token: str) -> Optional[List[dict]]:
    url = f"{BASE_URL}/accounts"
    try:
        resp = requests.get(url, headers=_auth_headers(token), verify=_get_verify(), timeout=10)
        if resp.status_code != 200:
            return None
        return resp.json()
    except requests.RequestException:
        return None

def api_get_account(token: str, username: str) -> Optional[dict]:
    url = f"{BASE_URL}/accounts/{username}"
    try:
        resp = requests.get(url, headers=_auth_headers(token), verify=_get_verify(), timeout=10)
        if resp.status_code != 200:
            return None
        return resp.json()
    except requests.RequestException:
        return None

def api_delete_account(token: str, username: str) -> Optional[int]:
    """
    Deletes (revokes) an account. Returns the HTTP status, or None if the
    backend could not be reached.
    """
    url = f"{BASE_URL}/accounts/{username}"
    try:
        resp = requests.delete(url, headers=_auth_headers(token), verify=_get_verify(), timeout=10)
        return resp.status_code
    except requests.RequestException:
        return None

def api_list_revocations(token: str) -> Optional[List[dict]]:
    url = f"{BASE_URL}/revocations"
    try:
        resp = requests.get(url, headers=_auth_headers(token), verify=_get_verify(), timeout=10)
        if resp.status_code != 200:
            return None
        return resp.json()
    except requests.RequestException:
        return None

def api_validate(client_token: str) -> Optional[dict]:
    """
    Asks the backend whether a client token is authorized right now.
    Returns {"authorized": bool, "reason": str | None}.
    """
    url = f"{BASE_URL}/access/validate"
    try:
        resp = requests.post(url, json={"token": client_token}, headers=_resolver_headers(), verify=_get_verify(), timeout=5)
        if resp.status_code == 200:
            return resp.json()
        if resp.status_code in (403, 404):
            detail = resp.json().get("detail")
            return detail if isinstance(detail, dict) else None
        return None
    except requests.RequestException:
        return None

def api_report_usage(client_token: str, bytes_used: int, seconds_used: int) -> bool:
    url = f"{BASE_URL}/access/usage"
    data = {"token": client_token, "bytes_used": bytes_used, "seconds_used": seconds_used}
    try:
        resp = requests.post(url, json=data, headers=_resolver_headers(), verify=_get_verify(), timeout=5)
        return resp.status_code == 204
    except requests.RequestException:
        return False
