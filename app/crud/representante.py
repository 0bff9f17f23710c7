from app.crud.base import CRUDBase
from app.models.representante import Representante

representante = CRUDBase(
    Representante,
    insertar="insertar_representante",
    editar="editar_representante",
    eliminar="eliminar_representante",
    campos=(
        "id_estudiante",
        "nombre_repre",
        "parentesco",
        "cedula_repre",
        "telefono_repre",
        "correo_repre",
        "lugar_nacimiento",
        "fecha_nacimiento",
        "direccion",
        "ocupacion",
        "lugar_trabajo",
        "estado",
        "municipio",
        "departamento",
        "estado_civil",
    ),
    orden=Representante.id_representante,
)
