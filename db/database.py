"""
WordFlip – Database initialisation & session management
========================================================
Creates the SQLite database file next to the application and provides
a session factory for the progress store.
"""

import os
import sys
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from db.models import Base

# ---------------------------------------------------------------------------
# Resolve a user-data directory that survives packaging with PyInstaller.
# ---------------------------------------------------------------------------

def _app_data_dir() -> Path:
    """Return a stable directory for the SQLite file.

    ``WORDFLIP_DATA_DIR`` overrides the default location.
    """
    override = os.environ.get("WORDFLIP_DATA_DIR")
    if override:
        data_dir = Path(override).expanduser()
    elif getattr(sys, "frozen", False):
        # Running as a PyInstaller bundle
        data_dir = Path(sys.executable).parent / "data"
    else:
        data_dir = Path(__file__).resolve().parent.parent / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


DB_PATH = _app_data_dir() / "wordflip.db"
DATABASE_URL = f"sqlite:///{DB_PATH}"

engine = create_engine(
    DATABASE_URL,
    echo=False,
    connect_args={"check_same_thread": False},
)

SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def init_db() -> None:
    """Create all tables if they do not exist yet."""
    Base.metadata.create_all(bind=engine)


def get_session() -> Session:
    """Return a new SQLAlchemy session."""
    return SessionLocal()
