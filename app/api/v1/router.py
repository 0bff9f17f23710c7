from fastapi import APIRouter

from app.api import auth
from app.api.v1 import (
    carreras,
    citas,
    discapacidades,
    estudiantes,
    facultades,
    historial_medico,
    incidencias,
    reporte_psicologico,
    representantes,
    usuarios,
)

api_router = APIRouter()

# Registro, login y /me antes de las rutas /usuarios/{id_usuario}
api_router.include_router(auth.router, prefix="/usuarios", tags=["auth"])
api_router.include_router(usuarios.router, prefix="/usuarios", tags=["usuarios"])

api_router.include_router(
    estudiantes.router, prefix="/estudiantes", tags=["estudiantes"]
)
api_router.include_router(
    representantes.router, prefix="/representantes", tags=["representantes"]
)
api_router.include_router(
    discapacidades.router, prefix="/discapacidades", tags=["discapacidades"]
)
api_router.include_router(facultades.router, prefix="/facultades", tags=["facultades"])
api_router.include_router(carreras.router, prefix="/carreras", tags=["carreras"])
api_router.include_router(citas.router, prefix="/citas", tags=["citas"])
api_router.include_router(incidencias.router, prefix="/incidencias", tags=["incidencias"])
api_router.include_router(
    historial_medico.router, prefix="/historial_medico", tags=["historial_medico"]
)
api_router.include_router(
    reporte_psicologico.router,
    prefix="/reporte-psicologico",
    tags=["reporte-psicologico"],
)
