from sqlalchemy import Column, ForeignKey, Integer, String, Text

from .base import BaseModel


class HistorialMedico(BaseModel):
    __tablename__ = "historial_medico"

    id_historialmedico = Column(Integer, primary_key=True, index=True)
    id_estudiante = Column(Integer, ForeignKey("estudiantes.id_estudiante"), nullable=False)
    certificado_conapdis = Column(String(50))
    informe_medico = Column(Text)
    tratamiento = Column(Text)
