import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.config.database import get_db
from app.schemas.historial_medico import HistorialMedicoCreate, HistorialMedicoUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list)
async def read_historiales_medicos(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener todos los historiales médicos con nombre, apellido y cédula del estudiante"""
    try:
        from app.crud.historial_medico import historial_medico
        return await historial_medico.get_multi(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener historiales médicos: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener historiales médicos")


@router.get("/estudiante/{id_estudiante}", response_model=list)
async def read_historial_por_estudiante(
    id_estudiante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.historial_medico import historial_medico
        historiales = await historial_medico.get_multi_by(db, id_estudiante=id_estudiante)

        if not historiales:
            raise HTTPException(
                status_code=404,
                detail="No se encontró historial médico para este estudiante",
            )

        return historiales
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener historial del estudiante {id_estudiante}: {e}")
        raise HTTPException(
            status_code=500, detail="Error al obtener historial médico por estudiante"
        )


@router.get("/{id_historialmedico}", response_model=dict)
async def read_historial_medico(
    id_historialmedico: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.historial_medico import historial_medico
        historial_obj = await historial_medico.get(db, id_historialmedico)

        if not historial_obj:
            raise HTTPException(status_code=404, detail="Historial médico no encontrado")

        return historial_obj
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener historial médico {id_historialmedico}: {e}")
        raise HTTPException(
            status_code=500, detail="Error al obtener historial médico por ID"
        )


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_historial_medico(
    historial_in: HistorialMedicoCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Crear historial médico; la respuesta incluye los datos del estudiante"""
    try:
        from app.crud.historial_medico import enriquecer_historial, historial_medico
        nuevo = await historial_medico.create(db, obj_in=historial_in.datos_normalizados())
        return await enriquecer_historial(db, nuevo)
    except Exception as e:
        logger.error(f"❌ Error al crear historial médico: {e}")
        raise HTTPException(status_code=500, detail="Error al crear historial médico")


@router.put("/{id_historialmedico}", response_model=dict)
async def update_historial_medico(
    historial_in: HistorialMedicoUpdate,
    id_historialmedico: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.historial_medico import historial_medico
        datos = historial_in.datos_normalizados(exclude_unset=True)
        actualizado = await historial_medico.update(db, id=id_historialmedico, obj_in=datos)

        if not actualizado:
            raise HTTPException(
                status_code=404,
                detail="Historial médico no encontrado o no se pudo actualizar",
            )

        return {"message": "Historial médico actualizado correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al editar historial médico {id_historialmedico}: {e}")
        raise HTTPException(status_code=500, detail="Error al editar historial médico")


@router.delete("/{id_historialmedico}", response_model=dict)
async def delete_historial_medico(
    id_historialmedico: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.historial_medico import historial_medico
        eliminado = await historial_medico.remove(db, id=id_historialmedico)

        if not eliminado:
            raise HTTPException(status_code=404, detail="Historial médico no encontrado")

        return {"message": "Historial médico eliminado correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al eliminar historial médico {id_historialmedico}: {e}")
        raise HTTPException(status_code=500, detail="Error al eliminar historial médico")
