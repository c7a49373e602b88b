# aac_server/api/user_settings.py

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from aac_server.api.auth import CurrentUser, get_current_user
from aac_server.core.preferences import VoiceSettings, get_voice_settings, save_voice_settings
from aac_server.database import get_db


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user-settings")


@router.post("/voice")
def save_voice(
    settings: VoiceSettings,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        save_voice_settings(db, current_user.id, settings)
    except (SQLAlchemyError, ValueError):
        db.rollback()
        logger.exception("Error saving voice settings")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Server error while saving voice settings"}
        )

    return {"success": True, "message": "Voice settings saved successfully"}


@router.get("/voice")
def read_voice(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        settings = get_voice_settings(db, current_user.id)
    except (SQLAlchemyError, ValueError):
        logger.exception("Error fetching voice settings")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Server error while fetching voice settings"}
        )

    return {"success": True, "settings": settings.model_dump()}
