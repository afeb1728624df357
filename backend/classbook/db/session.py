from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from classbook.core.config import settings

def enable_sqlite_foreign_keys(eng: Engine) -> None:
    # sqlite ignores ON DELETE CASCADE unless asked per connection
    if eng.dialect.name != "sqlite":
        return

    @event.listens_for(eng, "connect")
    def _fk_pragma(dbapi_conn, _record):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

engine = create_engine(settings.database_url, pool_pre_ping=True, future=True)
enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
