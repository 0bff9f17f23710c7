import asyncio
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from .settings import settings

logger = logging.getLogger(__name__)

# Un único engine por proceso, compartido por todas las solicitudes
engine = create_async_engine(
    settings.sqlalchemy_database_url,
    echo=settings.debug,
    pool_pre_ping=True,
    pool_recycle=1200,
    pool_size=10,
    max_overflow=20,
    pool_timeout=10,
    connect_args={
        "server_settings": {
            "application_name": "smged_api",
        },
        "command_timeout": 60,
    },
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=True,
)

Base = declarative_base()


async def get_db() -> AsyncSession:
    """Sesión por solicitud; se revierte si el handler falla"""
    session = None
    try:
        session = async_session_factory()
        yield session
    except Exception:
        if session:
            await session.rollback()
        raise
    finally:
        if session:
            await session.close()


async def test_connection(max_retries: int = 3, delay: float = 2.0) -> bool:
    """Comprueba la conexión con `SELECT 1`, con reintentos"""
    for attempt in range(max_retries):
        try:
            async with async_session_factory() as session:
                await session.execute(text("SELECT 1"))
                logger.info(f"✅ Conexión a la base de datos en el intento {attempt + 1}")
                return True
        except Exception as e:
            logger.warning(f"⚠️ Intento {attempt + 1} de conexión fallido: {e}")
            if attempt < max_retries - 1:
                await asyncio.sleep(delay)
    logger.error("❌ Fallaron todos los intentos de conexión")
    return False


async def close_db():
    """Libera el pool de conexiones al apagar el servicio"""
    try:
        await engine.dispose()
        logger.info("🔌 Conexiones cerradas")
    except Exception as e:
        logger.error(f"❌ Error al cerrar conexiones: {e}")
