import pytest

REPRESENTANTE = {
    "id_estudiante": 1,
    "nombre_repre": "rosa lopez",
    "parentesco": "madre",
    "cedula_repre": "v-7654321",
    "correo_repre": "Rosa@Correo.com",
    "municipio": "libertador",
}


@pytest.mark.asyncio
async def test_crear_normaliza(test_client, auth_headers, almacen):
    response = await test_client.post("/representantes", json=REPRESENTANTE, headers=auth_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["id_representante"] == 1
    assert data["nombre_repre"] == "Rosa Lopez"
    assert data["parentesco"] == "Madre"
    assert data["cedula_repre"] == "V-7654321"
    assert data["correo_repre"] == "rosa@correo.com"
    assert data["municipio"] == "Libertador"


@pytest.mark.asyncio
async def test_id_estudiante_debe_ser_positivo(test_client, auth_headers, almacen):
    response = await test_client.post(
        "/representantes", json={**REPRESENTANTE, "id_estudiante": -1}, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "id_estudiante"


@pytest.mark.asyncio
async def test_por_estudiante(test_client, auth_headers, almacen):
    almacen.representante.agregar(id_estudiante=5, nombre_repre="Rosa Lopez")

    response = await test_client.get("/representantes/estudiante/5", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["nombre_repre"] == "Rosa Lopez"

    response = await test_client.get("/representantes/estudiante/6", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_edicion_parcial(test_client, auth_headers, almacen):
    almacen.representante.agregar(
        id_estudiante=5, nombre_repre="Rosa Lopez", parentesco="Madre", telefono_repre="0414"
    )

    response = await test_client.put(
        "/representantes/1", json={"telefono_repre": "0426"}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Representante actualizado correctamente"}

    data = (await test_client.get("/representantes/1", headers=auth_headers)).json()
    assert data["telefono_repre"] == "0426"
    assert data["parentesco"] == "Madre"


@pytest.mark.asyncio
async def test_eliminar_inexistente(test_client, auth_headers, almacen):
    response = await test_client.delete("/representantes/8", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Representante no encontrado"}
