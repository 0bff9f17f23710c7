from datetime import timedelta

import pytest

from app.core.security import create_access_token, get_password_hash, verify_password, verify_token

USUARIO = {
    "nombre": "maria",
    "apellido": "gonzalez",
    "cedula_usuario": "V-12345678",
    "password": "secreto1",
    "rol": "psicologo",
}


class TestRegistro:
    @pytest.mark.asyncio
    async def test_registrar_guarda_hash_y_no_devuelve_password(self, test_client, almacen):
        response = await test_client.post("/usuarios/registrar", json=USUARIO)

        assert response.status_code == 201
        data = response.json()
        assert data["id_usuario"] == 1
        assert data["nombre"] == "Maria"
        assert "password" not in data

        guardado = almacen.usuario.filas[1]
        assert guardado["password"] != "secreto1"
        assert verify_password("secreto1", guardado["password"])

    @pytest.mark.asyncio
    async def test_cedula_duplicada(self, test_client, almacen):
        almacen.usuario.agregar(**{**USUARIO, "password": get_password_hash("x" * 6)})

        response = await test_client.post("/usuarios/registrar", json=USUARIO)

        assert response.status_code == 400
        assert response.json() == {"error": "El usuario ya existe"}

    @pytest.mark.asyncio
    async def test_registro_ignora_el_rol_enviado(self, test_client, almacen):
        response = await test_client.post(
            "/usuarios/registrar", json={**USUARIO, "rol": "administrador"}
        )

        assert response.status_code == 201
        assert response.json()["rol"] == "docente"
        assert almacen.usuario.filas[1]["rol"] == "docente"

    @pytest.mark.asyncio
    async def test_cuenta_registrada_no_administra_usuarios(self, test_client, almacen):
        await test_client.post(
            "/usuarios/registrar", json={**USUARIO, "rol": "administrador"}
        )
        login = await test_client.post(
            "/usuarios/login",
            json={"cedula_usuario": "V-12345678", "password": "secreto1"},
        )
        token = login.json()["token"]

        response = await test_client.get(
            "/usuarios", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Acceso denegado. No tienes los permisos necesarios."}

    @pytest.mark.asyncio
    async def test_cedula_con_formato_invalido(self, test_client, almacen):
        response = await test_client.post(
            "/usuarios/registrar", json={**USUARIO, "cedula_usuario": "12345678"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "cedula_usuario"


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_correcto_devuelve_token_con_rol(self, test_client, almacen):
        almacen.usuario.agregar(**{**USUARIO, "password": get_password_hash("secreto1")})

        response = await test_client.post(
            "/usuarios/login",
            json={"cedula_usuario": "V-12345678", "password": "secreto1"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        claims = verify_token(data["token"])
        assert claims["sub"] == "1"
        assert claims["rol"] == "psicologo"
        assert claims["cedula_usuario"] == "V-12345678"

    @pytest.mark.asyncio
    async def test_password_incorrecta(self, test_client, almacen):
        almacen.usuario.agregar(**{**USUARIO, "password": get_password_hash("secreto1")})

        response = await test_client.post(
            "/usuarios/login",
            json={"cedula_usuario": "V-12345678", "password": "otra-clave"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Credenciales inválidas"}

    @pytest.mark.asyncio
    async def test_password_en_texto_plano_no_autentica(self, test_client, almacen):
        almacen.usuario.agregar(**{**USUARIO, "password": "secreto1"})

        response = await test_client.post(
            "/usuarios/login",
            json={"cedula_usuario": "V-12345678", "password": "secreto1"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_usuario_inexistente(self, test_client, almacen):
        response = await test_client.post(
            "/usuarios/login",
            json={"cedula_usuario": "V-99999999", "password": "secreto1"},
        )

        assert response.status_code == 401


class TestToken:
    @pytest.mark.asyncio
    async def test_sin_token(self, test_client, almacen):
        response = await test_client.get("/estudiantes")

        assert response.status_code == 401
        assert response.json() == {"error": "Acceso denegado. Token no proporcionado."}

    @pytest.mark.asyncio
    async def test_token_invalido(self, test_client, almacen):
        response = await test_client.get(
            "/estudiantes", headers={"Authorization": "Bearer basura"}
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Token no válido o expirado."}

    @pytest.mark.asyncio
    async def test_token_expirado(self, test_client, almacen):
        token = create_access_token(subject=1, expires_delta=timedelta(minutes=-1))

        response = await test_client.get(
            "/estudiantes", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_me_devuelve_los_claims(self, test_client, auth_headers):
        response = await test_client.get("/usuarios/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["rol"] == "docente"
        assert response.json()["sub"] == "1"
