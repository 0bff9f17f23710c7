from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text, Time

from .base import BaseModel


class Incidencia(BaseModel):
    __tablename__ = "incidencias"

    id_incidencia = Column(Integer, primary_key=True, index=True)
    id_estudiante = Column(Integer, ForeignKey("estudiantes.id_estudiante"), nullable=False)
    hora_incidente = Column(Time, nullable=False)
    fecha_incidente = Column(Date, nullable=False)
    lugar_incidente = Column(String(150), nullable=False)
    descripcion_incidente = Column(Text)
    acuerdos = Column(Text)
    observaciones = Column(Text)
