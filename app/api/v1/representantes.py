import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.config.database import get_db
from app.schemas.representante import RepresentanteCreate, RepresentanteUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list)
async def read_representantes(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener todos los representantes"""
    try:
        from app.crud.representante import representante
        return await representante.get_multi(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener representantes: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener representantes")


@router.get("/estudiante/{id_estudiante}", response_model=dict)
async def read_representante_por_estudiante(
    id_estudiante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener el representante de un estudiante"""
    try:
        from app.crud.representante import representante
        representante_obj = await representante.get_by(db, id_estudiante=id_estudiante)

        if not representante_obj:
            raise HTTPException(
                status_code=404,
                detail="No se encontró representante para este estudiante",
            )

        return representante_obj
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener representante del estudiante {id_estudiante}: {e}")
        raise HTTPException(
            status_code=500, detail="Error al obtener representante por estudiante"
        )


@router.get("/{id_representante}", response_model=dict)
async def read_representante(
    id_representante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener representante por ID"""
    try:
        from app.crud.representante import representante
        representante_obj = await representante.get(db, id_representante)

        if not representante_obj:
            raise HTTPException(status_code=404, detail="Representante no encontrado")

        return representante_obj
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener representante {id_representante}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener representante por ID")


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_representante(
    representante_in: RepresentanteCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Crear representante"""
    try:
        from app.crud.representante import representante
        return await representante.create(db, obj_in=representante_in.datos_normalizados())
    except Exception as e:
        logger.error(f"❌ Error al crear representante: {e}")
        raise HTTPException(status_code=500, detail="Error al crear representante")


@router.put("/{id_representante}", response_model=dict)
async def update_representante(
    representante_in: RepresentanteUpdate,
    id_representante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Actualizar representante"""
    try:
        from app.crud.representante import representante
        datos = representante_in.datos_normalizados(exclude_unset=True)
        actualizado = await representante.update(db, id=id_representante, obj_in=datos)

        if not actualizado:
            raise HTTPException(
                status_code=404,
                detail="Representante no encontrado o no se pudo actualizar",
            )

        return {"message": "Representante actualizado correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al editar representante {id_representante}: {e}")
        raise HTTPException(status_code=500, detail="Error al editar representante")


@router.delete("/{id_representante}", response_model=dict)
async def delete_representante(
    id_representante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Eliminar representante"""
    try:
        from app.crud.representante import representante
        eliminado = await representante.remove(db, id=id_representante)

        if not eliminado:
            raise HTTPException(status_code=404, detail="Representante no encontrado")

        return {"message": "Representante eliminado correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al eliminar representante {id_representante}: {e}")
        raise HTTPException(status_code=500, detail="Error al eliminar representante")
