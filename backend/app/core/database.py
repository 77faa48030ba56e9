from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings

# Create async SQLAlchemy engine
engine = create_async_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DATABASE_ECHO,
)

# Create async SessionLocal class
SessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False
)

# Create Base class for models
Base = declarative_base()


async def init_db(bind: AsyncEngine = engine) -> None:
    """Create all tables that do not exist yet."""
    # Models must be imported so they register on Base.metadata
    import app.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# Dependency to get async DB session
async def get_db():
    """
    Dependency function to get async database session.
    Yields a database session and closes it after use.
    """
    async with SessionLocal() as session:
        yield session
