import pytest

from app.core.security import get_password_hash, verify_password


@pytest.fixture
def usuarios(almacen):
    almacen.usuario.agregar(
        nombre="Maria",
        apellido="Gonzalez",
        cedula_usuario="V-12345678",
        password=get_password_hash("secreto1"),
        rol="psicologo",
    )
    return almacen.usuario


@pytest.mark.asyncio
async def test_listar_requiere_administrador(test_client, auth_headers, usuarios):
    response = await test_client.get("/usuarios", headers=auth_headers)

    assert response.status_code == 403
    assert response.json() == {"error": "Acceso denegado. No tienes los permisos necesarios."}


@pytest.mark.asyncio
async def test_token_sin_rol(test_client, usuarios):
    from app.core.security import create_access_token

    token = create_access_token(subject=1)
    response = await test_client.get(
        "/usuarios", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 403
    assert response.json() == {"error": "No autorizado. Información de rol no disponible."}


@pytest.mark.asyncio
async def test_listar_sin_passwords(test_client, admin_headers, usuarios):
    response = await test_client.get("/usuarios", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data[0]["cedula_usuario"] == "V-12345678"
    assert "password" not in data[0]


@pytest.mark.asyncio
async def test_obtener(test_client, admin_headers, usuarios):
    response = await test_client.get("/usuarios/1", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["rol"] == "psicologo"

    response = await test_client.get("/usuarios/2", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Usuario no encontrado"}


@pytest.mark.asyncio
async def test_nombre_por_cedula_para_cualquier_rol(test_client, auth_headers, usuarios):
    response = await test_client.get("/usuarios/cedula/v-12345678", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"nombre": "Maria", "apellido": "Gonzalez"}


@pytest.mark.asyncio
async def test_editar_sin_password_conserva_la_actual(test_client, admin_headers, usuarios):
    response = await test_client.put(
        "/usuarios/1", json={"rol": "docente"}, headers=admin_headers
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Usuario actualizado correctamente"}
    fila = usuarios.filas[1]
    assert fila["rol"] == "docente"
    assert verify_password("secreto1", fila["password"])


@pytest.mark.asyncio
async def test_editar_password_se_guarda_como_hash(test_client, admin_headers, usuarios):
    response = await test_client.put(
        "/usuarios/1", json={"password": "nueva-clave"}, headers=admin_headers
    )

    assert response.status_code == 200
    fila = usuarios.filas[1]
    assert fila["password"] != "nueva-clave"
    assert verify_password("nueva-clave", fila["password"])


@pytest.mark.asyncio
async def test_eliminar(test_client, admin_headers, usuarios):
    assert (await test_client.delete("/usuarios/1", headers=admin_headers)).status_code == 200
    response = await test_client.delete("/usuarios/1", headers=admin_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_cedula_con_espacios_se_normaliza(test_client, auth_headers, usuarios):
    response = await test_client.get("/usuarios/cedula/v- 12345678", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["nombre"] == "Maria"


@pytest.mark.asyncio
async def test_editar_password_demasiado_larga(test_client, admin_headers, usuarios):
    response = await test_client.put(
        "/usuarios/1", json={"password": "x" * 16}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "password"
    assert verify_password("secreto1", usuarios.filas[1]["password"])
