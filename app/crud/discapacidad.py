from app.crud.base import CRUDBase
from app.models.discapacidad import Discapacidad

discapacidad = CRUDBase(
    Discapacidad,
    insertar="insertar_discapacidad",
    editar="editar_discapacidad",
    eliminar="eliminar_discapacidad",
    campos=("discapacidad",),
    primary_key_field="discapacidad_id",
    orden=Discapacidad.discapacidad.asc(),
)
