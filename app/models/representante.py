from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text

from .base import BaseModel


class Representante(BaseModel):
    __tablename__ = "representantes"

    id_representante = Column(Integer, primary_key=True, index=True)
    id_estudiante = Column(Integer, ForeignKey("estudiantes.id_estudiante"), nullable=False)
    nombre_repre = Column(String(150), nullable=False)
    parentesco = Column(String(50), nullable=False)
    cedula_repre = Column(String(20), nullable=False)
    telefono_repre = Column(String(20))
    correo_repre = Column(String(100))
    lugar_nacimiento = Column(String(150))
    fecha_nacimiento = Column(Date)
    direccion = Column(Text)
    ocupacion = Column(String(100))
    lugar_trabajo = Column(String(150))
    estado = Column(String(100))
    municipio = Column(String(100))
    departamento = Column(String(100))
    estado_civil = Column(String(50))
