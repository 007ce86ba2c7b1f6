from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.config import DATABASE_URL

connect_args = {}
engine_kwargs = {}
if DATABASE_URL.startswith("sqlite"):
    # FastAPI may hand a session to a different thread than the one that opened it
    connect_args["check_same_thread"] = False
    if DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        # Share the single in-memory database across connections
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args, **engine_kwargs)


def create_db_and_tables():
    # Import models so they register on the metadata
    from app import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_db():
    with Session(engine) as session:
        yield session
