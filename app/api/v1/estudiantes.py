import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.config.database import get_db
from app.schemas.estudiante import EstudianteCreate, EstudianteUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list)
async def read_estudiantes(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener todos los estudiantes con el nombre de su discapacidad"""
    try:
        from app.crud.estudiante import estudiante
        return await estudiante.get_multi(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener estudiantes: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener estudiantes")


@router.get("/{id_estudiante}", response_model=dict)
async def read_estudiante(
    id_estudiante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Obtener un estudiante con sus etiquetas de discapacidad, representante, carrera y facultad"""
    try:
        from app.crud.estudiante import enriquecer_estudiante, estudiante
        estudiante_obj = await estudiante.get(db, id_estudiante)

        if not estudiante_obj:
            raise HTTPException(status_code=404, detail="Estudiante no encontrado")

        return await enriquecer_estudiante(db, estudiante_obj)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener estudiante {id_estudiante}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener estudiante por ID")


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_estudiante(
    estudiante_in: EstudianteCreate,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Crear estudiante; la respuesta incluye el id generado y las etiquetas relacionadas"""
    try:
        from app.crud.estudiante import enriquecer_estudiante, estudiante
        nuevo = await estudiante.create(db, obj_in=estudiante_in.datos_normalizados())
        logger.info(f"🎓 Estudiante {nuevo['id_estudiante']} creado")
        return await enriquecer_estudiante(db, nuevo)
    except Exception as e:
        logger.error(f"❌ Error al crear estudiante: {e}")
        raise HTTPException(status_code=500, detail="Error al crear estudiante")


@router.put("/{id_estudiante}", response_model=dict)
async def update_estudiante(
    estudiante_in: EstudianteUpdate,
    id_estudiante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Actualizar solo los campos enviados"""
    try:
        from app.crud.estudiante import estudiante
        datos = estudiante_in.datos_normalizados(exclude_unset=True)
        actualizado = await estudiante.update(db, id=id_estudiante, obj_in=datos)

        if not actualizado:
            raise HTTPException(
                status_code=404, detail="Estudiante no encontrado o no se pudo actualizar"
            )

        return {"message": "Estudiante actualizado correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al editar estudiante {id_estudiante}: {e}")
        raise HTTPException(status_code=500, detail="Error al editar estudiante")


@router.delete("/{id_estudiante}", response_model=dict)
async def delete_estudiante(
    id_estudiante: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Eliminar estudiante"""
    try:
        from app.crud.estudiante import estudiante
        eliminado = await estudiante.remove(db, id=id_estudiante)

        if not eliminado:
            raise HTTPException(status_code=404, detail="Estudiante no encontrado")

        return {"message": "Estudiante eliminado correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al eliminar estudiante {id_estudiante}: {e}")
        raise HTTPException(status_code=500, detail="Error al eliminar estudiante")
