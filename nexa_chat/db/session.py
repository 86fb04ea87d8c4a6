from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def make_engine(database_url: str, ssl: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # TestClient and uvicorn's threadpool share one connection pool
        connect_args["check_same_thread"] = False
    elif ssl:
        # Encrypted, certificate not verified (hosted providers with self-signed certs)
        connect_args["sslmode"] = "require"
    return create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
