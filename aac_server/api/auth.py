# aac_server/api/auth.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, status, Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from aac_server.database import get_db
from aac_server.models.user import User as UserModel
from aac_server.core.preferences import create_default_profile
from aac_server.core.security import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth")


class SignupRequest(BaseModel):
    username: str
    password: str
    firstName: str | None = None
    lastName: str | None = None
    email: str


class LoginRequest(BaseModel):
    username: str
    password: str


class CurrentUser(BaseModel):
    id: int
    username: str


def authenticate_user(db: Session, username: str, password: str):
    user = db.query(UserModel).filter(UserModel.username == username).first()
    if not user or not verify_password(password, user.password):
        return None
    return user


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)

def get_current_user(token: str | None = Depends(oauth2_scheme)) -> CurrentUser:
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided."
        )
    try:
        payload = decode_access_token(token)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )
    return CurrentUser(id=payload["id"], username=payload.get("username", ""))


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(req: SignupRequest, db: Session = Depends(get_db)):
    try:
        user_exists = db.query(UserModel).filter(
            or_(UserModel.username == req.username, UserModel.email == req.email)
        ).first()
        if user_exists:
            raise HTTPException(status_code=400, detail="Username or email already exists")

        new_user = UserModel(
            username=req.username,
            password=get_password_hash(req.password),
            first_name=req.firstName,
            last_name=req.lastName,
            email=req.email,
        )
        db.add(new_user)
        db.commit()
        db.refresh(new_user)

        # Separate commit; a failure here leaves the user without a profile.
        create_default_profile(db, new_user.id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Registration error")
        raise HTTPException(status_code=500, detail="Server error during registration")

    logger.info("Registered user %s", new_user.username)
    return {
        "message": "User registered successfully",
        "user": {
            "id": new_user.id,
            "username": new_user.username,
            "email": new_user.email,
        }
    }


@router.post("/login")
def login(req: LoginRequest, db: Session = Depends(get_db)):
    try:
        user = authenticate_user(db, req.username, req.password)
    except SQLAlchemyError:
        logger.exception("Login error")
        raise HTTPException(status_code=500, detail="Server error during login")

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    token = create_access_token(data={"id": user.id, "username": user.username})
    return {
        "message": "Login successful",
        "token": token,
        "user": user.public(),
    }


@router.get("/me")
def read_users_me(current_user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        user = db.query(UserModel).filter(UserModel.id == current_user.id).first()
    except SQLAlchemyError:
        logger.exception("Error fetching user")
        raise HTTPException(status_code=500, detail="Server error")

    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return {"user": user.public()}
