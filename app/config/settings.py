from pydantic_settings import BaseSettings
from typing import List, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def normalizar_url_async(url: str) -> str:
    """Adaptar una URL de PostgreSQL (libpq/Neon) al driver asyncpg"""
    partes = urlsplit(url)
    esquema = partes.scheme
    if esquema in ("postgres", "postgresql"):
        esquema = "postgresql+asyncpg"

    parametros = []
    for clave, valor in parse_qsl(partes.query, keep_blank_values=True):
        if clave == "sslmode":
            parametros.append(("ssl", valor))
        elif clave == "channel_binding":
            continue
        else:
            parametros.append((clave, valor))

    return urlunsplit(
        (esquema, partes.netloc, partes.path, urlencode(parametros), partes.fragment)
    )


class Settings(BaseSettings):
    # Database
    database_url: str
    use_local_db: bool = False
    local_database_url: Optional[str] = None
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_host: Optional[str] = None
    db_port: int = 5432
    db_database: Optional[str] = None

    # JWT
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Server
    port: int = 3000
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    allowed_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def sqlalchemy_database_url(self) -> str:
        """URL efectiva: la base local si USE_LOCAL_DB está activo, si no la alojada"""
        url = self.database_url
        if self.use_local_db:
            if self.local_database_url:
                url = self.local_database_url
            elif self.db_host:
                url = (
                    f"postgresql://{self.db_user}:{self.db_password}"
                    f"@{self.db_host}:{self.db_port}/{self.db_database}"
                )
        return normalizar_url_async(url)


settings = Settings()
