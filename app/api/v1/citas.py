import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.config.database import get_db
from app.schemas.cita import CitaCreate, CitaUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list)
async def read_citas(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener todas las citas, las más recientes primero, con el nombre del estudiante"""
    try:
        from app.crud.cita import cita
        return await cita.get_multi(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener citas: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener citas")


@router.get("/estudiante/{id_estudiante}", response_model=list)
async def read_citas_por_estudiante(
    id_estudiante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.cita import cita
        citas = await cita.get_multi_by(db, id_estudiante=id_estudiante)

        if not citas:
            raise HTTPException(
                status_code=404, detail="No se encontraron citas para este estudiante"
            )

        return citas
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener citas del estudiante {id_estudiante}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener citas por estudiante")


@router.get("/{id_citas}", response_model=dict)
async def read_cita(
    id_citas: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.cita import cita
        cita_obj = await cita.get(db, id_citas)

        if not cita_obj:
            raise HTTPException(status_code=404, detail="Cita no encontrada")

        return cita_obj
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener cita {id_citas}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener cita por ID")


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_cita(
    cita_in: CitaCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Agendar cita; queda pendiente hasta marcarla como realizada"""
    try:
        from app.crud.cita import cita
        nueva = await cita.create(db, obj_in=cita_in.datos_normalizados())
        nueva.setdefault("pendiente", True)
        return nueva
    except Exception as e:
        logger.error(f"❌ Error al crear cita: {e}")
        raise HTTPException(status_code=500, detail="Error al crear cita")


@router.put("/{id_citas}", response_model=dict)
async def update_cita(
    cita_in: CitaUpdate,
    id_citas: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.cita import cita
        datos = cita_in.datos_normalizados(exclude_unset=True)
        actualizado = await cita.update(db, id=id_citas, obj_in=datos)

        if not actualizado:
            raise HTTPException(
                status_code=404, detail="Cita no encontrada o no se pudo actualizar"
            )

        return {"message": "Cita actualizada correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al editar cita {id_citas}: {e}")
        raise HTTPException(status_code=500, detail="Error al editar cita")


@router.patch("/marcar-realizada/{id_citas}", response_model=dict)
async def marcar_cita_realizada(
    id_citas: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Cambiar el estado de la cita a realizada sin tocar los demás campos"""
    try:
        from app.crud.cita import cita
        actualizado = await cita.update(db, id=id_citas, obj_in={"pendiente": False})

        if not actualizado:
            raise HTTPException(
                status_code=404, detail="Cita no encontrada o ya marcada como realizada"
            )

        return {"message": "Cita marcada como realizada"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al marcar la cita {id_citas} como realizada: {e}")
        raise HTTPException(
            status_code=500, detail="Error al marcar la cita como realizada"
        )


@router.delete("/{id_citas}", response_model=dict)
async def delete_cita(
    id_citas: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    try:
        from app.crud.cita import cita
        eliminado = await cita.remove(db, id=id_citas)

        if not eliminado:
            raise HTTPException(status_code=404, detail="Cita no encontrada")

        return {"message": "Cita eliminada correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al eliminar cita {id_citas}: {e}")
        raise HTTPException(status_code=500, detail="Error al eliminar cita")
