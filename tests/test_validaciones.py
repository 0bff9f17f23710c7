"""Forma de las respuestas 400: una entrada (field, message, location) por regla violada"""

import pytest


@pytest.mark.asyncio
async def test_todos_los_faltantes_se_reportan_juntos(test_client, auth_headers, almacen):
    response = await test_client.post("/estudiantes", json={}, headers=auth_headers)

    assert response.status_code == 400
    errores = response.json()["errors"]
    assert {e["field"] for e in errores} == {"nombres", "apellidos", "cedula"}
    for error in errores:
        assert error["message"] == "El campo es requerido"
        assert error["location"] == "body"


@pytest.mark.asyncio
async def test_un_faltante_produce_una_sola_entrada(test_client, auth_headers, almacen):
    response = await test_client.post(
        "/facultades", json={"facultad": "Ingenieria"}, headers=auth_headers
    )

    assert response.status_code == 400
    errores = response.json()["errors"]
    assert len(errores) == 1
    assert errores[0]["field"] == "siglas"


@pytest.mark.asyncio
async def test_id_de_ruta_debe_ser_entero_positivo(test_client, auth_headers, almacen):
    for id_invalido in ("0", "-3", "abc"):
        response = await test_client.get(f"/citas/{id_invalido}", headers=auth_headers)
        assert response.status_code == 400
        errores = response.json()["errors"]
        assert errores[0]["field"] == "id_citas"
        assert errores[0]["location"] == "path"


@pytest.mark.asyncio
async def test_opcional_vacio_omite_la_regla(test_client, auth_headers, almacen):
    response = await test_client.post(
        "/estudiantes",
        json={"nombres": "ana", "apellidos": "lopez", "cedula": "v-1", "correo": ""},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["correo"] is None


@pytest.mark.asyncio
async def test_formato_invalido_usa_mensaje_propio(test_client, auth_headers, almacen):
    response = await test_client.post(
        "/estudiantes",
        json={"nombres": "ana", "apellidos": "lopez", "cedula": "v-1", "correo": "no-es-correo"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    errores = response.json()["errors"]
    assert errores == [
        {
            "field": "correo",
            "message": "Debe ser un correo electrónico válido",
            "location": "body",
        }
    ]


@pytest.mark.asyncio
async def test_edicion_valida_solo_lo_enviado(test_client, auth_headers, almacen):
    almacen.facultad.agregar(facultad="Ciencias", siglas="FC")

    response = await test_client.put(
        "/facultades/1", json={"siglas": "fc-1"}, headers=auth_headers
    )

    assert response.status_code == 400
    errores = response.json()["errors"]
    assert [e["field"] for e in errores] == ["siglas"]


@pytest.mark.asyncio
async def test_cuerpo_que_no_es_json(test_client, auth_headers, almacen):
    response = await test_client.post(
        "/discapacidades",
        content="no es json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["errors"]
