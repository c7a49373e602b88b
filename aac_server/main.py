# aac_server/main.py

import logging
from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException
from aac_server.api import auth, user_settings, symbols
from aac_server.config import LOG_LEVEL
from aac_server.database import init_db, get_db, check_connection


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

init_db()

app = FastAPI(title="GLPAAC API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(user_settings.router)
app.include_router(symbols.router)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=exc.headers
    )


@app.get("/api/test-db")
def test_db(db: Session = Depends(get_db)):
    try:
        timestamp = check_connection(db)
    except SQLAlchemyError:
        logger.exception("Database connection error")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Database connection failed"}
        )
    return {"success": True, "timestamp": str(timestamp)}


@app.get("/", response_class=PlainTextResponse)
def root():
    return "GLPAAC API is running"
