from sqlalchemy import Column, Integer, String

from .base import BaseModel


class Usuario(BaseModel):
    __tablename__ = "usuarios"

    id_usuario = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    apellido = Column(String(100), nullable=False)
    cedula_usuario = Column(String(15), unique=True, nullable=False)
    # Hash bcrypt, nunca se expone en las respuestas
    password = Column(String(255), nullable=False)
    rol = Column(String(20), nullable=False)
