# scripts/init_db.py
"""
Create the dashboard tables and, optionally, a user who can sign in.

    DATABASE_URL=sqlite:///db.sqlite python -m scripts.init_db
    ADMIN_EMAIL=user@nextmail.com ADMIN_PASSWORD=123456 python -m scripts.init_db
"""

import logging
import os

from app.auth.passwords import get_password_hash
from app.db.engine import get_engine
from app.db.schema import metadata, users
from app.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_user(conn, name: str, email: str, password: str) -> None:
    conn.execute(
        users.insert().values(
            name=name,
            email=email,
            password=get_password_hash(password),
        )
    )


def main():
    configure_logging()
    engine = get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created.")

    email = (os.environ.get("ADMIN_EMAIL") or "").strip()
    password = os.environ.get("ADMIN_PASSWORD") or ""
    if email and password:
        with engine.begin() as conn:
            create_user(conn, "Admin", email, password)
        logger.info("Created user %s", email)

if __name__ == "__main__":
    main()
