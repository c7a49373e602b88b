# aac_server/database.py

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from aac_server.config import DATABASE_URL
from aac_server.models import Base


connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def init_db():
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_connection(db: Session):
    """
    Runs a trivial query against the database and returns the server time.
    """
    return db.execute(text("SELECT CURRENT_TIMESTAMP")).scalar()
