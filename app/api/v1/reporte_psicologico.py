import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.config.database import get_db
from app.schemas.reporte_psicologico import (
    ReportePsicologicoCreate,
    ReportePsicologicoUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list)
async def read_reportes_psicologicos(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.reporte_psicologico import reporte_psicologico
        return await reporte_psicologico.get_multi(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener reportes psicológicos: {e}")
        raise HTTPException(
            status_code=500, detail="Error al obtener reportes psicológicos"
        )


@router.get("/estudiante/{id_estudiante}", response_model=list)
async def read_reportes_por_estudiante(
    id_estudiante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.reporte_psicologico import reporte_psicologico
        reportes = await reporte_psicologico.get_multi_by(db, id_estudiante=id_estudiante)

        if not reportes:
            raise HTTPException(
                status_code=404,
                detail="No se encontraron reportes psicológicos para este estudiante",
            )

        return reportes
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener reportes del estudiante {id_estudiante}: {e}")
        raise HTTPException(
            status_code=500,
            detail="Error al obtener reportes psicológicos por estudiante",
        )


@router.get("/{id_psicologico}", response_model=dict)
async def read_reporte_psicologico(
    id_psicologico: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.reporte_psicologico import reporte_psicologico
        reporte_obj = await reporte_psicologico.get(db, id_psicologico)

        if not reporte_obj:
            raise HTTPException(status_code=404, detail="Reporte psicológico no encontrado")

        return reporte_obj
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener reporte psicológico {id_psicologico}: {e}")
        raise HTTPException(
            status_code=500, detail="Error al obtener reporte psicológico por ID"
        )


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_reporte_psicologico(
    reporte_in: ReportePsicologicoCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.reporte_psicologico import reporte_psicologico
        return await reporte_psicologico.create(db, obj_in=reporte_in.datos_normalizados())
    except Exception as e:
        logger.error(f"❌ Error al crear reporte psicológico: {e}")
        raise HTTPException(status_code=500, detail="Error al crear reporte psicológico")


@router.put("/{id_psicologico}", response_model=dict)
async def update_reporte_psicologico(
    reporte_in: ReportePsicologicoUpdate,
    id_psicologico: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.reporte_psicologico import reporte_psicologico
        datos = reporte_in.datos_normalizados(exclude_unset=True)
        actualizado = await reporte_psicologico.update(db, id=id_psicologico, obj_in=datos)

        if not actualizado:
            raise HTTPException(
                status_code=404,
                detail="Reporte psicológico no encontrado o no se pudo actualizar",
            )

        return {"message": "Reporte psicológico actualizado correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al editar reporte psicológico {id_psicologico}: {e}")
        raise HTTPException(status_code=500, detail="Error al editar reporte psicológico")


@router.delete("/{id_psicologico}", response_model=dict)
async def delete_reporte_psicologico(
    id_psicologico: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.reporte_psicologico import reporte_psicologico
        eliminado = await reporte_psicologico.remove(db, id=id_psicologico)

        if not eliminado:
            raise HTTPException(status_code=404, detail="Reporte psicológico no encontrado")

        return {"message": "Reporte psicológico eliminado correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al eliminar reporte psicológico {id_psicologico}: {e}")
        raise HTTPException(
            status_code=500, detail="Error al eliminar reporte psicológico"
        )
