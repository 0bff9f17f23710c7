from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class Facultad(BaseModel):
    __tablename__ = "facultades"

    id_facultad = Column(Integer, primary_key=True, index=True)
    facultad = Column(String(150), nullable=False)
    siglas = Column(String(20), nullable=False)

    carreras = relationship("Carrera", back_populates="facultad")
