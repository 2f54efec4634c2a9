# app/db/executor.py

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.sql.expression import Executable

logger = logging.getLogger(__name__)


class EngineExecutor:
    """
    StatementExecutor backed by a SQLAlchemy engine.

    Every call runs in its own transaction (engine.begin), so a statement either
    commits on its own or not at all.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def execute(self, statement: Executable) -> int:
        with self.engine.begin() as conn:
            result = conn.execute(statement)
        logger.debug("Statement affected %s row(s)", result.rowcount)
        return result.rowcount
