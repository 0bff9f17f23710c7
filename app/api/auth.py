import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_active_user
from app.config.database import get_db
from app.config.settings import settings
from app.core.security import create_access_token, get_password_hash, verify_password
from app.schemas.auth import Token, UserLogin
from app.schemas.usuario import ROL_REGISTRO, UsuarioCreate

logger = logging.getLogger(__name__)

router = APIRouter()


async def authenticate_user(db: AsyncSession, cedula_usuario: str, password: str):
    """Autenticar usuario por cédula y contraseña"""
    from app.crud.usuario import usuario

    user = await usuario.get_credenciales(db, cedula_usuario)
    if not user:
        return None
    if not verify_password(password, user["password"]):
        return None
    return user


@router.post("/registrar", status_code=status.HTTP_201_CREATED)
async def registrar_usuario(
    usuario_in: UsuarioCreate, db: AsyncSession = Depends(get_db)
):
    """
    Registrar una cuenta con el rol por defecto; la contraseña se guarda como hash bcrypt
    """
    try:
        from app.crud.usuario import usuario

        datos = usuario_in.datos_normalizados()
        if await usuario.get_credenciales(db, datos["cedula_usuario"]):
            raise HTTPException(status_code=400, detail="El usuario ya existe")

        datos["password"] = get_password_hash(datos["password"])
        datos["rol"] = ROL_REGISTRO
        nuevo = await usuario.create(db, obj_in=datos)
        nuevo.pop("password", None)
        return nuevo
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error al registrar usuario: {e}")
        raise HTTPException(status_code=500, detail="Error al registrar usuario")


@router.post("/login", response_model=Token)
async def login_for_access_token(
    user_data: UserLogin, db: AsyncSession = Depends(get_db)
):
    """
    Endpoint de login que devuelve un JWT token
    """
    try:
        user = await authenticate_user(db, user_data.cedula_usuario, user_data.password)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Credenciales inválidas",
                headers={"WWW-Authenticate": "Bearer"},
            )

        access_token_expires = timedelta(minutes=settings.access_token_expire_minutes)
        access_token = create_access_token(
            subject=user["id_usuario"],
            expires_delta=access_token_expires,
            claims={"cedula_usuario": user["cedula_usuario"], "rol": user["rol"]},
        )
        logger.info(f"🔑 Inicio de sesión de {user['cedula_usuario']}")

        return {"token": access_token, "token_type": "bearer"}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error en login: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor",
        )


@router.get("/me")
async def get_current_user_info(current_user=Depends(get_current_active_user)):
    """
    Obtener información del usuario actual a partir de su token
    """
    return current_user
