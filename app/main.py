import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.router import api_router
from app.config.database import close_db, get_db, test_connection
from app.config.settings import settings
from app.core.errores import registrar_manejadores
from app.core.logging import configurar_logging
from app.core.middleware import RequestLoggingMiddleware

configurar_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"🚀 Iniciando SMGED API ({settings.environment})...")

    destino = "local" if settings.use_local_db else "alojada"
    logger.info(f"📊 Verificando base de datos {destino}...")
    if await test_connection():
        logger.info("✅ Base de datos disponible")
    else:
        logger.warning("⚠️ Base de datos no disponible, las solicitudes fallarán hasta que responda")

    yield

    logger.info("🔄 Cerrando conexiones...")
    await close_db()


app = FastAPI(
    title="SMGED API",
    description="""
    ## Sistema de gestión de estudiantes con discapacidad 🎓

    - 👨‍🎓 Estudiantes, representantes y discapacidades
    - 📅 Citas, incidencias, historial médico y reportes psicológicos
    - 🏫 Facultades y carreras
    - 🔐 Usuarios con roles (administrador, psicologo, docente)
    """,
    version="1.0.0",
    lifespan=lifespan,
)

registrar_manejadores(app)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/", tags=["🏠 General"])
async def root():
    """Información general del servicio"""
    return {
        "message": "SMGED API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", tags=["🏠 General"])
async def health_check():
    return {
        "status": "healthy",
        "environment": settings.environment,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/api/version", tags=["🏠 General"])
async def database_version(db: AsyncSession = Depends(get_db)):
    """Versión del servidor PostgreSQL, sirve para comprobar la conexión"""
    try:
        result = await db.execute(text("SELECT version()"))
        return {"version": result.scalar()}
    except Exception as e:
        logger.error(f"❌ Error al conectar con la base de datos: {e}")
        raise HTTPException(status_code=500, detail="Error al conectar con la base de datos")


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)
