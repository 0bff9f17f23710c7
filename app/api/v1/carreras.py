import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.config.database import get_db
from app.schemas.carrera import CarreraCreate, CarreraUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list)
async def read_carreras(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener todas las carreras con el nombre de su facultad"""
    try:
        from app.crud.carrera import carrera
        return await carrera.get_multi(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener carreras: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener carreras")


@router.get("/{id_carrera}", response_model=dict)
async def read_carrera(
    id_carrera: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener carrera específica"""
    try:
        from app.crud.carrera import carrera
        carrera_obj = await carrera.get(db, id_carrera)

        if not carrera_obj:
            raise HTTPException(status_code=404, detail="Carrera no encontrada")

        return carrera_obj
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener carrera {id_carrera}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener carrera por ID")


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_carrera(
    carrera_in: CarreraCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Crear carrera"""
    try:
        from app.crud.carrera import carrera
        return await carrera.create(db, obj_in=carrera_in.datos_normalizados())
    except Exception as e:
        logger.error(f"❌ Error al crear carrera: {e}")
        raise HTTPException(status_code=500, detail="Error al crear carrera")


@router.put("/{id_carrera}", response_model=dict)
async def update_carrera(
    carrera_in: CarreraUpdate,
    id_carrera: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Actualizar carrera"""
    try:
        from app.crud.carrera import carrera
        datos = carrera_in.datos_normalizados(exclude_unset=True)
        actualizado = await carrera.update(db, id=id_carrera, obj_in=datos)

        if not actualizado:
            raise HTTPException(
                status_code=404, detail="Carrera no encontrada o no se pudo actualizar"
            )

        return {"message": "Carrera actualizada correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al editar carrera {id_carrera}: {e}")
        raise HTTPException(status_code=500, detail="Error al editar carrera")


@router.delete("/{id_carrera}", response_model=dict)
async def delete_carrera(
    id_carrera: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Eliminar carrera"""
    try:
        from app.crud.carrera import carrera
        eliminado = await carrera.remove(db, id=id_carrera)

        if not eliminado:
            raise HTTPException(status_code=404, detail="Carrera no encontrada")

        return {"message": "Carrera eliminada correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al eliminar carrera {id_carrera}: {e}")
        raise HTTPException(status_code=500, detail="Error al eliminar carrera")
