# aac_server/core/symbols.py

import logging
import requests
from aac_server.config import OPENSYMBOLS_ACCESS_KEY, OPENSYMBOLS_URL


logger = logging.getLogger(__name__)


class SymbolSearchError(Exception):
    """
    Upstream failure. status_code is the upstream status, or 500 when the
    request never got a response.
    """

    def __init__(self, status_code: int, details):
        super().__init__(f"OpenSymbols request failed with status {status_code}")
        self.status_code = status_code
        self.details = details


def _error_details(response: requests.Response):
    try:
        return response.json()
    except ValueError:
        return response.text


def search_symbols(query: str):
    try:
        response = requests.get(
            OPENSYMBOLS_URL,
            params={"access_token": OPENSYMBOLS_ACCESS_KEY, "q": query}
        )
        response.raise_for_status()
        return response.json()
    except requests.HTTPError as e:
        logger.error("OpenSymbols API error: %s", e)
        raise SymbolSearchError(e.response.status_code, _error_details(e.response)) from e
    except (requests.RequestException, ValueError) as e:
        logger.error("OpenSymbols API error: %s", e)
        raise SymbolSearchError(500, str(e)) from e
