from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String

from .base import BaseModel


class Cita(BaseModel):
    __tablename__ = "citas"

    id_citas = Column(Integer, primary_key=True, index=True)
    id_estudiante = Column(Integer, ForeignKey("estudiantes.id_estudiante"), nullable=False)
    fecha_cita = Column(Date, nullable=False)
    motivo_cita = Column(String(255))
    pendiente = Column(Boolean, server_default="true")
