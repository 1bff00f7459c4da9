# app/infrastructure/persistence/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

import config  # Usamos el config.py del root

# La URL se lee del .env (ver config.py). En desarrollo se usa SQLite.
DATABASE_URL = config.DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db():
    """Crea las tablas que no existan."""
    from . import models  # noqa: F401  registra las tablas en Base.metadata
    Base.metadata.create_all(bind=engine)


def get_db():
    """Una sesión por petición; se cierra siempre al terminar."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """Patrón LIKE '%texto%' con los comodines del usuario escapados (usar con escape=LIKE_ESCAPE)."""
    escaped = text
    for char in (LIKE_ESCAPE, "%", "_"):
        escaped = escaped.replace(char, LIKE_ESCAPE + char)
    return f"%{escaped}%"
