import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.config.database import get_db
from app.schemas.discapacidad import DiscapacidadCreate, DiscapacidadUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list)
async def read_discapacidades(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener todas las discapacidades en orden alfabético"""
    try:
        from app.crud.discapacidad import discapacidad
        return await discapacidad.get_multi(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener discapacidades: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener discapacidades")


@router.get("/{discapacidad_id}", response_model=dict)
async def read_discapacidad(
    discapacidad_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.discapacidad import discapacidad
        discapacidad_obj = await discapacidad.get(db, discapacidad_id)

        if not discapacidad_obj:
            raise HTTPException(status_code=404, detail="Discapacidad no encontrada")

        return discapacidad_obj
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener discapacidad {discapacidad_id}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener discapacidad por ID")


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_discapacidad(
    discapacidad_in: DiscapacidadCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.discapacidad import discapacidad
        return await discapacidad.create(db, obj_in=discapacidad_in.datos_normalizados())
    except Exception as e:
        logger.error(f"❌ Error al crear discapacidad: {e}")
        raise HTTPException(status_code=500, detail="Error al crear discapacidad")


@router.put("/{discapacidad_id}", response_model=dict)
async def update_discapacidad(
    discapacidad_in: DiscapacidadUpdate,
    discapacidad_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.discapacidad import discapacidad
        actualizado = await discapacidad.update(
            db, id=discapacidad_id, obj_in=discapacidad_in.datos_normalizados()
        )

        if not actualizado:
            raise HTTPException(
                status_code=404,
                detail="Discapacidad no encontrada o no se pudo actualizar",
            )

        return {"message": "Discapacidad actualizada correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al editar discapacidad {discapacidad_id}: {e}")
        raise HTTPException(status_code=500, detail="Error al editar discapacidad")


@router.delete("/{discapacidad_id}", response_model=dict)
async def delete_discapacidad(
    discapacidad_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.discapacidad import discapacidad
        eliminado = await discapacidad.remove(db, id=discapacidad_id)

        if not eliminado:
            raise HTTPException(status_code=404, detail="Discapacidad no encontrada")

        return {"message": "Discapacidad eliminada correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al eliminar discapacidad {discapacidad_id}: {e}")
        raise HTTPException(status_code=500, detail="Error al eliminar discapacidad")
