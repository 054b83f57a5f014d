from __future__ import annotations

from collections.abc import Generator

from services.checkout.app.db.database import db_session
from sqlalchemy.orm import Session


def get_db() -> Generator[Session, None, None]:
    """Yield a request-scoped session.

    Routers commit explicitly; anything left uncommitted when the request fails is rolled back.
    """

    db = db_session()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
