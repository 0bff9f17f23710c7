import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.config.database import get_db
from app.schemas.facultad import FacultadCreate, FacultadUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list)
async def read_facultades(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener todas las facultades en orden alfabético"""
    try:
        from app.crud.facultad import facultad
        return await facultad.get_multi(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener facultades: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener facultades")


# Declarada antes de /{id_facultad} para que "carreras" no se lea como un id
@router.get("/carreras", response_model=list)
async def read_facultades_con_carreras(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener facultades con sus carreras anidadas"""
    try:
        from app.crud.facultad import facultad
        return await facultad.get_with_carreras(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener facultades con carreras: {e}")
        raise HTTPException(
            status_code=500, detail="Error al obtener facultades con carreras"
        )


@router.get("/{id_facultad}", response_model=dict)
async def read_facultad(
    id_facultad: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener facultad por ID"""
    try:
        from app.crud.facultad import facultad
        facultad_obj = await facultad.get(db, id_facultad)

        if not facultad_obj:
            raise HTTPException(status_code=404, detail="Facultad no encontrada")

        return facultad_obj
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener facultad {id_facultad}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener facultad por ID")


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_facultad(
    facultad_in: FacultadCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Crear facultad"""
    try:
        from app.crud.facultad import facultad
        return await facultad.create(db, obj_in=facultad_in.datos_normalizados())
    except Exception as e:
        logger.error(f"❌ Error al crear facultad: {e}")
        raise HTTPException(status_code=500, detail="Error al crear facultad")


@router.put("/{id_facultad}", response_model=dict)
async def update_facultad(
    facultad_in: FacultadUpdate,
    id_facultad: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Actualizar facultad"""
    try:
        from app.crud.facultad import facultad
        datos = facultad_in.datos_normalizados(exclude_unset=True)
        actualizado = await facultad.update(db, id=id_facultad, obj_in=datos)

        if not actualizado:
            raise HTTPException(
                status_code=404, detail="Facultad no encontrada o no se pudo actualizar"
            )

        return {"message": "Facultad actualizada correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al editar facultad {id_facultad}: {e}")
        raise HTTPException(status_code=500, detail="Error al editar facultad")


@router.delete("/{id_facultad}", response_model=dict)
async def delete_facultad(
    id_facultad: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Eliminar facultad"""
    try:
        from app.crud.facultad import facultad
        eliminado = await facultad.remove(db, id=id_facultad)

        if not eliminado:
            raise HTTPException(status_code=404, detail="Facultad no encontrada")

        return {"message": "Facultad eliminada correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al eliminar facultad {id_facultad}: {e}")
        raise HTTPException(status_code=500, detail="Error al eliminar facultad")
