import logging
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.security import verify_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)  # auto_error=False para responder 401 con nuestro mensaje


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """
    Obtener los claims del usuario desde el token JWT
    """
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Acceso denegado. Token no proporcionado.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    claims = verify_token(credentials.credentials)
    if claims is None:
        logger.warning("🔒 Token rechazado: firma inválida o expirado")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Token no válido o expirado.",
        )
    return claims


async def get_current_active_user(current_user=Depends(get_current_user)):
    """
    Obtener usuario activo (se puede extender para verificar si está activo)
    """
    return current_user


def require_roles(*roles: str):
    """Dependencia que solo deja pasar a los roles indicados"""

    async def verificar_rol(current_user=Depends(get_current_active_user)):
        rol = current_user.get("rol")
        if not rol:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="No autorizado. Información de rol no disponible.",
            )
        if rol not in roles:
            logger.warning(f"🔒 Rol '{rol}' sin permiso, se requiere uno de {roles}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Acceso denegado. No tienes los permisos necesarios.",
            )
        return current_user

    return verificar_rol
