from pydantic import BaseModel

from app.schemas.validaciones import TextoRequerido


class Token(BaseModel):
    token: str
    token_type: str


class UserLogin(BaseModel):
    cedula_usuario: TextoRequerido
    password: TextoRequerido
