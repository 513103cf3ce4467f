# guessword/db.py
from sqlalchemy import create_engine, text
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from .config import DATABASE_URL

engine = create_engine(DATABASE_URL, echo=False, pool_pre_ping=True)
SessionLocal = sessionmaker(engine, expire_on_commit=False)

class Base(DeclarativeBase):
    pass

def ping(bind=engine):
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))

def init_db(bind=engine):
    ping(bind)
    Base.metadata.create_all(bind)
