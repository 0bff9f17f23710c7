from app.crud.base import CRUDBase
from app.models.reporte_psicologico import ReportePsicologico

reporte_psicologico = CRUDBase(
    ReportePsicologico,
    insertar="insertar_reporte_psicologico",
    editar="editar_reporte_psicologico",
    eliminar="eliminar_reporte_psicologico",
    campos=(
        "id_estudiante",
        "nombre",
        "apellido",
        "lugar_nacimiento",
        "fecha_nacimiento",
        "nivel_instruccion",
        "motivo_consulta",
        "sintesis_diagnostica",
        "recomendaciones",
    ),
    orden=ReportePsicologico.id_psicologico,
)
