import logging
from typing import Any, Dict, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase, ErrorPersistencia
from app.models.usuario import Usuario

logger = logging.getLogger(__name__)

CAMPOS = ("nombre", "apellido", "cedula_usuario", "password", "rol")


class CRUDUsuario(CRUDBase[Usuario]):
    def _consulta(self):
        # El hash de la contraseña nunca sale en las lecturas públicas
        tabla = Usuario.__table__
        return select(*[c for c in tabla.c if c.name != "password"])

    async def get_credenciales(
        self, db: AsyncSession, cedula_usuario: str
    ) -> Optional[Dict[str, Any]]:
        """Fila completa, con el hash, para verificar el inicio de sesión"""
        tabla = Usuario.__table__
        filas = await self._filas(
            db, select(tabla).where(tabla.c.cedula_usuario == cedula_usuario)
        )
        return filas[0] if filas else None

    async def create(self, db: AsyncSession, *, obj_in: Dict[str, Any]) -> Dict[str, Any]:
        valores = {campo: obj_in.get(campo) for campo in CAMPOS}
        result = await db.execute(
            insert(Usuario.__table__).values(**valores).returning(Usuario.id_usuario)
        )
        id_usuario = result.scalar()
        await db.commit()
        if id_usuario is None:
            raise ErrorPersistencia("El registro de usuario no devolvió un identificador")
        logger.info(f"👤 Usuario {id_usuario} registrado")
        return {"id_usuario": id_usuario, **valores}

    async def update(self, db: AsyncSession, *, id: Any, obj_in: Dict[str, Any]) -> bool:
        datos = dict(obj_in)
        if not datos.get("password"):
            tabla = Usuario.__table__
            result = await db.execute(
                select(tabla.c.password).where(tabla.c.id_usuario == id)
            )
            datos["password"] = result.scalar()
        return await super().update(db, id=id, obj_in=datos)


usuario = CRUDUsuario(
    Usuario,
    insertar="insertar_usuario",
    editar="editar_usuario",
    eliminar="eliminar_usuario",
    campos=CAMPOS,
    orden=Usuario.id_usuario,
)
