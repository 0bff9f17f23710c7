from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel, RegistroMixin


class Estudiante(BaseModel, RegistroMixin):
    __tablename__ = "estudiantes"

    id_estudiante = Column(Integer, primary_key=True, index=True)
    nombres = Column(String(100), nullable=False)
    apellidos = Column(String(100), nullable=False)
    cedula = Column(String(20), unique=True, nullable=False)
    telefono = Column(String(20))
    correo = Column(String(100))
    direccion = Column(Text)
    discapacidad_id = Column(Integer, ForeignKey("discapacidades.discapacidad_id"))
    fecha_nacimiento = Column(Date)
    observaciones = Column(Text)
    seguimiento = Column(Text)
    id_carrera = Column(Integer, ForeignKey("carreras.id_carrera"))

    # Relationships
    discapacidad = relationship("Discapacidad", back_populates="estudiantes")
    carrera = relationship("Carrera", back_populates="estudiantes")
