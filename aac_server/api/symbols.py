# aac_server/api/symbols.py

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from aac_server.core.symbols import SymbolSearchError, search_symbols


router = APIRouter(prefix="/api/symbols")


@router.get("")
def symbols(q: str = ""):
    """
    Proxies a query to OpenSymbols with the server-held access key.
    The upstream body is returned as-is.
    """
    try:
        return search_symbols(q)
    except SymbolSearchError as e:
        return JSONResponse(
            status_code=e.status_code,
            content={"error": "Failed to fetch symbols", "details": e.details}
        )
