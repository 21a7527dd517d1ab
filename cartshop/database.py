# cartshop/database.py
import os

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

# DATABASE_URL makes containerized runs configurable; the fallback points at the compose Postgres service.
DATABASE_URL = os.environ.get(
    "DATABASE_URL",
    "postgresql+asyncpg://postgres:postgres@db:5432/cartshop",
)
SQL_ECHO = os.environ.get("SQL_ECHO", "0") == "1"

Base = declarative_base()


def make_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO):
    return create_async_engine(url, echo=echo, future=True)


def make_session_maker(engine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


engine = make_engine()
async_session_maker = make_session_maker(engine)


async def create_tables(bind=None):
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
