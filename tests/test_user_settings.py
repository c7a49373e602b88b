# tests/test_user_settings.py

import json
from unittest.mock import patch

from sqlalchemy.exc import SQLAlchemyError

from aac_server.core.security import create_access_token
from aac_server.models.user import UserProfile


VOICE = {"rate": 1.5, "pitch": 0.8, "voiceName": "X"}


def profile_for(db_session, user_id):
    db_session.expire_all()
    return db_session.query(UserProfile).filter_by(user_id=user_id, profile_type="user").first()


def test_voice_settings_require_a_token(client):
    assert client.get("/api/user-settings/voice").status_code == 401
    assert client.post("/api/user-settings/voice", json=VOICE).status_code == 401


def test_get_defaults_without_profile_row(client):
    token = create_access_token({"id": 42, "username": "nobody"})

    res = client.get("/api/user-settings/voice", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 200
    assert res.json() == {"success": True, "settings": {"rate": 1, "pitch": 1, "voiceName": ""}}


def test_get_defaults_for_fresh_signup(client, auth_headers):
    res = client.get("/api/user-settings/voice", headers=auth_headers)

    assert res.json()["settings"] == {"rate": 1, "pitch": 1, "voiceName": ""}


def test_save_then_get_round_trip_keeps_other_preferences(client, db_session, registered_user, auth_headers):
    profile = profile_for(db_session, registered_user["id"])
    profile.preferences = {"theme": "dark"}
    db_session.commit()

    res = client.post("/api/user-settings/voice", json=VOICE, headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Voice settings saved successfully"}

    res = client.get("/api/user-settings/voice", headers=auth_headers)
    assert res.json()["settings"] == VOICE

    preferences = profile_for(db_session, registered_user["id"]).preferences
    assert preferences["theme"] == "dark"
    assert preferences["voice"] == VOICE


def test_save_is_idempotent(client, db_session, registered_user, auth_headers):
    client.post("/api/user-settings/voice", json=VOICE, headers=auth_headers)
    first = profile_for(db_session, registered_user["id"]).preferences

    client.post("/api/user-settings/voice", json=VOICE, headers=auth_headers)
    second = profile_for(db_session, registered_user["id"]).preferences

    assert first == second
    assert db_session.query(UserProfile).filter_by(user_id=registered_user["id"]).count() == 1


def test_save_creates_profile_when_missing(client, db_session):
    token = create_access_token({"id": 7, "username": "late"})

    res = client.post("/api/user-settings/voice", json=VOICE, headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 200
    assert profile_for(db_session, 7).preferences == {"voice": VOICE}


def test_get_reads_preferences_stored_as_string(client, db_session, registered_user, auth_headers):
    profile = profile_for(db_session, registered_user["id"])
    profile.preferences = json.dumps({"voice": VOICE})
    db_session.commit()

    res = client.get("/api/user-settings/voice", headers=auth_headers)

    assert res.json()["settings"] == VOICE


def test_get_falls_back_to_defaults_when_stored_voice_is_not_an_object(client, db_session, registered_user, auth_headers):
    profile = profile_for(db_session, registered_user["id"])
    profile.preferences = {"voice": "x"}
    db_session.commit()

    res = client.get("/api/user-settings/voice", headers=auth_headers)

    assert res.status_code == 200
    assert res.json()["settings"] == {"rate": 1, "pitch": 1, "voiceName": ""}


def test_save_database_error_returns_500(client, auth_headers):
    with patch("aac_server.api.user_settings.save_voice_settings", side_effect=SQLAlchemyError("down")):
        res = client.post("/api/user-settings/voice", json=VOICE, headers=auth_headers)

    assert res.status_code == 500
    assert res.json() == {"success": False, "message": "Server error while saving voice settings"}


def test_get_database_error_returns_500(client, auth_headers):
    with patch("aac_server.api.user_settings.get_voice_settings", side_effect=SQLAlchemyError("down")):
        res = client.get("/api/user-settings/voice", headers=auth_headers)

    assert res.status_code == 500
    assert res.json()["success"] is False
