import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.config.database import get_db
from app.schemas.incidencia import IncidenciaCreate, IncidenciaUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list)
async def read_incidencias(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.incidencia import incidencia
        return await incidencia.get_multi(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener incidencias: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener incidencias")


@router.get("/estudiante/{id_estudiante}", response_model=list)
async def read_incidencias_por_estudiante(
    id_estudiante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener las incidencias registradas para un estudiante"""
    try:
        from app.crud.incidencia import incidencia
        incidencias = await incidencia.get_multi_by(db, id_estudiante=id_estudiante)

        if not incidencias:
            raise HTTPException(
                status_code=404,
                detail="No se encontraron incidencias para este estudiante",
            )

        return incidencias
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener incidencias del estudiante {id_estudiante}: {e}")
        raise HTTPException(
            status_code=500, detail="Error al obtener incidencias por estudiante"
        )


@router.get("/{id_incidencia}", response_model=dict)
async def read_incidencia(
    id_incidencia: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.incidencia import incidencia
        incidencia_obj = await incidencia.get(db, id_incidencia)

        if not incidencia_obj:
            raise HTTPException(status_code=404, detail="Incidencia no encontrada")

        return incidencia_obj
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener incidencia {id_incidencia}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener incidencia por ID")


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_incidencia(
    incidencia_in: IncidenciaCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.incidencia import incidencia
        return await incidencia.create(db, obj_in=incidencia_in.datos_normalizados())
    except Exception as e:
        logger.error(f"❌ Error al crear incidencia: {e}")
        raise HTTPException(status_code=500, detail="Error al crear incidencia")


@router.put("/{id_incidencia}", response_model=dict)
async def update_incidencia(
    incidencia_in: IncidenciaUpdate,
    id_incidencia: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.incidencia import incidencia
        datos = incidencia_in.datos_normalizados(exclude_unset=True)
        actualizado = await incidencia.update(db, id=id_incidencia, obj_in=datos)

        if not actualizado:
            raise HTTPException(
                status_code=404, detail="Incidencia no encontrada o no se pudo actualizar"
            )

        return {"message": "Incidencia actualizada correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al editar incidencia {id_incidencia}: {e}")
        raise HTTPException(status_code=500, detail="Error al editar incidencia")


@router.delete("/{id_incidencia}", response_model=dict)
async def delete_incidencia(
    id_incidencia: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.incidencia import incidencia
        eliminado = await incidencia.remove(db, id=id_incidencia)

        if not eliminado:
            raise HTTPException(status_code=404, detail="Incidencia no encontrada")

        return {"message": "Incidencia eliminada correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al eliminar incidencia {id_incidencia}: {e}")
        raise HTTPException(status_code=500, detail="Error al eliminar incidencia")
