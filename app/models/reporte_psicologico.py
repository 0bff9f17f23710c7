from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text

from .base import BaseModel


class ReportePsicologico(BaseModel):
    __tablename__ = "reporte_psicologico"

    id_psicologico = Column(Integer, primary_key=True, index=True)
    id_estudiante = Column(Integer, ForeignKey("estudiantes.id_estudiante"), nullable=False)
    nombre = Column(String(100))
    apellido = Column(String(100))
    lugar_nacimiento = Column(String(150))
    fecha_nacimiento = Column(Date)
    nivel_instruccion = Column(String(100))
    motivo_consulta = Column(Text)
    sintesis_diagnostica = Column(Text)
    recomendaciones = Column(Text)
