import pytest

INCIDENCIA = {
    "id_estudiante": 1,
    "hora_incidente": "10:30:00",
    "fecha_incidente": "2024-04-02",
    "lugar_incidente": "biblioteca central",
    "descripcion_incidente": " Caída en escaleras ",
}


@pytest.mark.asyncio
async def test_crear(test_client, auth_headers, almacen):
    response = await test_client.post("/incidencias", json=INCIDENCIA, headers=auth_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["id_incidencia"] == 1
    assert data["hora_incidente"] == "10:30:00"
    assert data["lugar_incidente"] == "Biblioteca Central"
    assert data["descripcion_incidente"] == "Caída en escaleras"


@pytest.mark.asyncio
async def test_hora_con_formato_invalido(test_client, auth_headers, almacen):
    response = await test_client.post(
        "/incidencias", json={**INCIDENCIA, "hora_incidente": "mediodia"}, headers=auth_headers
    )

    assert response.status_code == 400
    errores = response.json()["errors"]
    assert errores == [
        {
            "field": "hora_incidente",
            "message": "Debe tener el formato HH:MM:SS",
            "location": "body",
        }
    ]


@pytest.mark.asyncio
async def test_falta_lugar(test_client, auth_headers, almacen):
    datos = {k: v for k, v in INCIDENCIA.items() if k != "lugar_incidente"}

    response = await test_client.post("/incidencias", json=datos, headers=auth_headers)

    assert response.status_code == 400
    assert [e["field"] for e in response.json()["errors"]] == ["lugar_incidente"]


@pytest.mark.asyncio
async def test_por_estudiante(test_client, auth_headers, almacen):
    almacen.incidencia.agregar(id_estudiante=4, lugar_incidente="Aula 3")

    response = await test_client.get("/incidencias/estudiante/4", headers=auth_headers)
    assert response.status_code == 200
    assert len(response.json()) == 1

    response = await test_client.get("/incidencias/estudiante/5", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "No se encontraron incidencias para este estudiante"}


@pytest.mark.asyncio
async def test_editar_y_eliminar(test_client, auth_headers, almacen):
    almacen.incidencia.agregar(id_estudiante=4, lugar_incidente="Aula 3", acuerdos=None)

    response = await test_client.put(
        "/incidencias/1", json={"acuerdos": "Citar al representante"}, headers=auth_headers
    )
    assert response.status_code == 200
    assert almacen.incidencia.filas[1]["lugar_incidente"] == "Aula 3"
    assert almacen.incidencia.filas[1]["acuerdos"] == "Citar al representante"

    assert (await test_client.delete("/incidencias/1", headers=auth_headers)).status_code == 200
    assert (await test_client.delete("/incidencias/1", headers=auth_headers)).status_code == 404
