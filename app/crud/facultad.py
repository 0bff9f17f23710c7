from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.facultad import Facultad


class CRUDFacultad(CRUDBase[Facultad]):
    async def get_with_carreras(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """Facultades en orden alfabético, cada una con sus carreras anidadas"""
        from app.crud.carrera import carrera

        facultades = await self.get_multi(db)
        carreras = await carrera.get_multi(db)
        return [
            {
                **fac,
                "carreras": [
                    c for c in carreras if c["id_facultad"] == fac["id_facultad"]
                ],
            }
            for fac in facultades
        ]


facultad = CRUDFacultad(
    Facultad,
    insertar="insertar_facultad",
    editar="editar_facultad",
    eliminar="eliminar_facultad",
    campos=("facultad", "siglas"),
    orden=Facultad.facultad.asc(),
)
