import logging

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user, require_roles
from app.config.database import get_db
from app.core.security import get_password_hash
from app.schemas.usuario import UsuarioUpdate
from app.utils.helpers import normalizar_cedula

logger = logging.getLogger(__name__)

router = APIRouter()

solo_administrador = require_roles("administrador")


@router.get("", response_model=list)
async def read_usuarios(
    db: AsyncSession = Depends(get_db),
    current_user=Depends(solo_administrador),
):
    """Listar cuentas (sin contraseñas)"""
    try:
        from app.crud.usuario import usuario
        return await usuario.get_multi(db)
    except Exception as e:
        logger.error(f"❌ Error al obtener usuarios: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener usuarios")


@router.get("/cedula/{cedula_usuario}", response_model=dict)
async def read_nombre_por_cedula(
    cedula_usuario: str,
    db: AsyncSession = Depends(get_db),
    current_user=Depends(get_current_active_user),
):
    """Nombre y apellido del titular de una cédula"""
    try:
        from app.crud.usuario import usuario
        usuario_obj = await usuario.get_by(db, cedula_usuario=normalizar_cedula(cedula_usuario))

        if not usuario_obj:
            raise HTTPException(status_code=404, detail="Usuario no encontrado")

        return {"nombre": usuario_obj["nombre"], "apellido": usuario_obj["apellido"]}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al buscar usuario por cédula: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener usuario por cédula")


@router.get("/{id_usuario}", response_model=dict)
async def read_usuario(
    id_usuario: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(solo_administrador),
):
    try:
        from app.crud.usuario import usuario
        usuario_obj = await usuario.get(db, id_usuario)

        if not usuario_obj:
            raise HTTPException(status_code=404, detail="Usuario no encontrado")

        return usuario_obj
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al obtener usuario {id_usuario}: {e}")
        raise HTTPException(status_code=500, detail="Error al obtener usuario por ID")


@router.put("/{id_usuario}", response_model=dict)
async def update_usuario(
    usuario_in: UsuarioUpdate,
    id_usuario: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(solo_administrador),
):
    """Actualizar cuenta; sin contraseña nueva se conserva la actual"""
    try:
        from app.crud.usuario import usuario
        datos = usuario_in.datos_normalizados(exclude_unset=True)
        if datos.get("password"):
            datos["password"] = get_password_hash(datos["password"])
        actualizado = await usuario.update(db, id=id_usuario, obj_in=datos)

        if not actualizado:
            raise HTTPException(
                status_code=404, detail="Usuario no encontrado o no se pudo actualizar"
            )

        return {"message": "Usuario actualizado correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al editar usuario {id_usuario}: {e}")
        raise HTTPException(status_code=500, detail="Error al editar usuario")


@router.delete("/{id_usuario}", response_model=dict)
async def delete_usuario(
    id_usuario: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
    current_user=Depends(solo_administrador),
):
    try:
        from app.crud.usuario import usuario
        eliminado = await usuario.remove(db, id=id_usuario)

        if not eliminado:
            raise HTTPException(status_code=404, detail="Usuario no encontrado")

        return {"message": "Usuario eliminado correctamente"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al eliminar usuario {id_usuario}: {e}")
        raise HTTPException(status_code=500, detail="Error al eliminar usuario")
