from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class Carrera(BaseModel):
    __tablename__ = "carreras"

    id_carrera = Column(Integer, primary_key=True, index=True)
    carrera = Column(String(150), nullable=False)
    id_facultad = Column(Integer, ForeignKey("facultades.id_facultad"), nullable=False)

    # Relationships
    facultad = relationship("Facultad", back_populates="carreras")
    estudiantes = relationship("Estudiante", back_populates="carrera")
