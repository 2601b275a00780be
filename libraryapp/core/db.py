import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import scoped_session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from libraryapp.configs import DB_URI, DEBUG

logger = logging.getLogger(__name__)
# In-memory SQLite lives on a single connection; share it across threads
engine_kwargs = {'echo': DEBUG}
if DB_URI.startswith('sqlite'):
    if ':memory:' in DB_URI:
        engine_kwargs['poolclass'] = StaticPool
    engine_kwargs['connect_args'] = {'check_same_thread': False}
else:
    engine_kwargs['client_encoding'] = 'utf8'
engine = create_engine(DB_URI, **engine_kwargs)
session = scoped_session(sessionmaker(
    bind=engine, autocommit=False, autoflush=False))

class LibraryBase:
    @classmethod
    def get_many(cls, offset=None, limit=None):
        return session.query(cls).order_by(cls.id).offset(offset).limit(limit).all()

Base = declarative_base(cls=LibraryBase)

def init():
    try:
        Base.metadata.create_all(bind=engine)
        return session
    except Exception as e:
        logger.warning(f"[WARNING] Database initialization failed: {e}")
