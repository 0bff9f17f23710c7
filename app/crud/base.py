import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class ErrorPersistencia(Exception):
    """La función almacenada no devolvió el resultado esperado"""


class CRUDBase(Generic[ModelType]):
    def __init__(
        self,
        model: Type[ModelType],
        *,
        insertar: str,
        editar: str,
        eliminar: str,
        campos: Sequence[str],
        campos_editar: Optional[Sequence[str]] = None,
        primary_key_field: str = None,
        orden: Any = None,
    ):
        """
        Objeto CRUD sobre las funciones almacenadas de una tabla.

        Las lecturas se hacen con consultas parametrizadas sobre el modelo; las
        escrituras invocan por nombre las funciones ``insertar``, ``editar`` y
        ``eliminar`` con argumentos posicionales en el orden de ``campos``.
        """
        self.model = model
        self.insertar = insertar
        self.editar = editar
        self.eliminar = eliminar
        self.campos = tuple(campos)
        self.campos_editar = tuple(campos_editar or campos)
        self.primary_key_field = primary_key_field or self._get_primary_key_field()
        self.orden = orden

    def _get_primary_key_field(self):
        """
        Obtiene el nombre del campo de clave primaria del modelo.
        """
        for column in self.model.__table__.columns:
            if column.primary_key:
                return column.name
        return "id"  # fallback por defecto

    def _consulta(self):
        """Consulta de lectura; los recursos con etiquetas de otras tablas la extienden"""
        return select(self.model.__table__)

    def _columna(self, nombre: str):
        return self.model.__table__.c[nombre]

    async def _filas(self, db: AsyncSession, consulta) -> List[Dict[str, Any]]:
        result = await db.execute(consulta)
        return [dict(fila) for fila in result.mappings().all()]

    async def _llamar(self, db: AsyncSession, funcion: str, *args: Any) -> Any:
        """Ejecuta ``SELECT funcion(args...)`` y confirma la transacción"""
        result = await db.execute(select(getattr(func, funcion)(*args)))
        valor = result.scalar()
        await db.commit()
        return valor

    async def get(self, db: AsyncSession, id: Any) -> Optional[Dict[str, Any]]:
        consulta = self._consulta().where(self._columna(self.primary_key_field) == id)
        filas = await self._filas(db, consulta)
        return filas[0] if filas else None

    async def get_multi(self, db: AsyncSession) -> List[Dict[str, Any]]:
        consulta = self._consulta()
        if self.orden is not None:
            consulta = consulta.order_by(self.orden)
        return await self._filas(db, consulta)

    async def get_by(self, db: AsyncSession, **filtros: Any) -> Optional[Dict[str, Any]]:
        filas = await self.get_multi_by(db, **filtros)
        return filas[0] if filas else None

    async def get_multi_by(self, db: AsyncSession, **filtros: Any) -> List[Dict[str, Any]]:
        consulta = self._consulta()
        for campo, valor in filtros.items():
            consulta = consulta.where(self._columna(campo) == valor)
        if self.orden is not None:
            consulta = consulta.order_by(self.orden)
        return await self._filas(db, consulta)

    async def create(self, db: AsyncSession, *, obj_in: Dict[str, Any]) -> Dict[str, Any]:
        """
        Inserta con la función almacenada y devuelve la fila creada.

        Si la función devuelve un registro se combina con los datos enviados;
        si devuelve solo el identificador se agrega bajo la clave primaria.
        """
        args = [obj_in.get(campo) for campo in self.campos]
        resultado = await self._llamar(db, self.insertar, *args)
        if resultado is None:
            raise ErrorPersistencia(f"{self.insertar} no devolvió un identificador")
        if hasattr(resultado, "keys"):
            return {**obj_in, **dict(resultado)}
        return {self.primary_key_field: resultado, **obj_in}

    async def update(self, db: AsyncSession, *, id: Any, obj_in: Dict[str, Any]) -> bool:
        """Los campos ausentes viajan como NULL y conservan su valor almacenado"""
        args = [obj_in.get(campo) for campo in self.campos_editar]
        return bool(await self._llamar(db, self.editar, id, *args))

    async def remove(self, db: AsyncSession, *, id: Any) -> bool:
        return bool(await self._llamar(db, self.eliminar, id))
