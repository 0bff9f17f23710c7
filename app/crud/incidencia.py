from app.crud.base import CRUDBase
from app.models.incidencia import Incidencia

incidencia = CRUDBase(
    Incidencia,
    insertar="insertar_incidencia",
    editar="editar_incidencia",
    eliminar="eliminar_incidencia",
    campos=(
        "id_estudiante",
        "hora_incidente",
        "fecha_incidente",
        "lugar_incidente",
        "descripcion_incidente",
        "acuerdos",
        "observaciones",
    ),
    orden=Incidencia.id_incidencia,
)
