from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import declared_attr

from app.config.database import Base


class RegistroMixin:
    """Mixin para las marcas de registro y actualización de una fila"""

    @declared_attr
    def fecha_registro(cls):
        return Column(DateTime(timezone=True), server_default=func.now())

    @declared_attr
    def fecha_actualizacion(cls):
        return Column(
            DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
        )


class BaseModel(Base):
    """Modelo base de las tablas administradas por funciones almacenadas"""

    __abstract__ = True
