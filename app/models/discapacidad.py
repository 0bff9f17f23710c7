from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class Discapacidad(BaseModel):
    __tablename__ = "discapacidades"

    discapacidad_id = Column(Integer, primary_key=True, index=True)
    discapacidad = Column(String(100), nullable=False)

    estudiantes = relationship("Estudiante", back_populates="discapacidad")
