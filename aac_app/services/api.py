# aac_app/services/api.py

import requests
from aac_app.config import API_BASE_URL


def _request(method, path, token=None, **kwargs):
    """
    Calls the backend and returns the decoded JSON body.
    Any non-2xx status or network failure becomes {"error": message}.
    """
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    try:
        res = requests.request(method, f"{API_BASE_URL}{path}", headers=headers, **kwargs)
    except requests.RequestException as e:
        return {"error": f"Network error: {e}"}

    try:
        data = res.json()
    except ValueError:
        data = None

    if not res.ok:
        message = None
        if isinstance(data, dict):
            message = data.get("message") or data.get("error")
        return {"error": message or f"Status {res.status_code}", "status": res.status_code}
    return data


# -------------------------------
# Authentication-related functions
# -------------------------------

def signup_user(username, password, first_name, last_name, email):
    return _request("POST", "/api/auth/signup", json={
        "username": username,
        "password": password,
        "firstName": first_name,
        "lastName": last_name,
        "email": email,
    })


def login_user(username, password):
    """
    Logs in a user. The response carries the bearer token and public user fields.
    """
    return _request("POST", "/api/auth/login", json={"username": username, "password": password})


def get_user_info(token):
    return _request("GET", "/api/auth/me", token=token)


# -------------------------------
# Voice settings
# -------------------------------

def get_voice_settings(token):
    return _request("GET", "/api/user-settings/voice", token=token)


def save_voice_settings(token, settings):
    return _request("POST", "/api/user-settings/voice", token=token, json=settings)


# -------------------------------
# Symbols
# -------------------------------

def search_symbols(query):
    """
    Searches OpenSymbols through the backend proxy.
    Returns a list of symbols, each with at least `name` and `image_url`.
    """
    return _request("GET", "/api/symbols", params={"q": query})
