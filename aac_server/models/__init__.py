# aac_server/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()

from .user import User, UserProfile  # noqa: E402,F401
