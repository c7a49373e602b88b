# aac_server/core/preferences.py

import json
import logging
from pydantic import BaseModel
from sqlalchemy.orm import Session
from aac_server.models.user import UserProfile


logger = logging.getLogger(__name__)

PROFILE_TYPE = "user"


class VoiceSettings(BaseModel):
    rate: float = 1
    pitch: float = 1
    voiceName: str = ""


DEFAULT_VOICE = VoiceSettings()


# -------------------------------
# Preferences document helpers
# -------------------------------

def parse_preferences(raw) -> dict:
    """
    Accepts the stored column value, which may be None, a dict or a
    serialized JSON string.
    """
    if not raw:
        return {}
    if isinstance(raw, str):
        raw = json.loads(raw)
    if not isinstance(raw, dict):
        raise ValueError(f"Preferences must be an object, got {type(raw).__name__}")
    return dict(raw)


def merge_voice(preferences: dict, settings: VoiceSettings) -> dict:
    merged = dict(preferences)
    merged["voice"] = settings.model_dump()
    return merged


def voice_from_preferences(preferences: dict) -> VoiceSettings:
    voice = preferences.get("voice")
    if not voice or not isinstance(voice, dict):
        return DEFAULT_VOICE.model_copy()
    return VoiceSettings(
        rate=voice.get("rate") or 1,
        pitch=voice.get("pitch") or 1,
        voiceName=voice.get("voiceName") or "",
    )


# -------------------------------
# Profile persistence
# -------------------------------

def get_profile(db: Session, user_id: int) -> UserProfile | None:
    return db.query(UserProfile).filter(
        UserProfile.user_id == user_id,
        UserProfile.profile_type == PROFILE_TYPE
    ).first()


def create_default_profile(db: Session, user_id: int) -> UserProfile:
    profile = UserProfile(user_id=user_id, profile_type=PROFILE_TYPE, preferences={})
    db.add(profile)
    db.commit()
    return profile


def save_voice_settings(db: Session, user_id: int, settings: VoiceSettings) -> dict:
    profile = get_profile(db, user_id)

    if profile:
        preferences = merge_voice(parse_preferences(profile.preferences), settings)
        profile.preferences = preferences
    else:
        preferences = merge_voice({}, settings)
        db.add(UserProfile(user_id=user_id, profile_type=PROFILE_TYPE, preferences=preferences))

    db.commit()
    logger.info("Saved voice settings for user %s", user_id)
    return preferences


def get_voice_settings(db: Session, user_id: int) -> VoiceSettings:
    profile = get_profile(db, user_id)
    if not profile:
        return DEFAULT_VOICE.model_copy()
    return voice_from_preferences(parse_preferences(profile.preferences))
