import pytest
from httpx import AsyncClient

from tests.utils.json_compare import assert_echoes_payload

GENERATED_FIELDS = {"id", "license_number", "issuer_id", "created_at", "updated_at"}


@pytest.mark.asyncio
async def test_issue_license_generates_number(client: AsyncClient, auth_headers, admin_user, test_data):
    payload = test_data.record("driving_licenses", "male_holder")

    response = await client.post("/driving-licenses", json=payload, headers=auth_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["license_number"] == "3201011505900001"
    assert data["issuer_id"] == admin_user.id
    assert_echoes_payload(data, payload, GENERATED_FIELDS)


@pytest.mark.asyncio
async def test_shared_pattern_gets_sequence_one_then_two(client: AsyncClient, auth_headers, test_data):
    first = test_data.record("driving_licenses", "male_holder")
    # Same region, birth date and sex, different person
    second = dict(first, national_id="3201019876543210", full_name="Budi Wijaya")

    r1 = await client.post("/driving-licenses", json=first, headers=auth_headers)
    r2 = await client.post("/driving-licenses", json=second, headers=auth_headers)

    assert r1.json()["license_number"] == "3201011505900001"
    assert r2.json()["license_number"] == "3201011505900002"


@pytest.mark.asyncio
async def test_female_holder_encoding(client: AsyncClient, auth_headers, test_data):
    payload = test_data.record("driving_licenses", "female_holder")

    response = await client.post("/driving-licenses", json=payload, headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["license_number"] == "3201015708950001"


@pytest.mark.asyncio
async def test_same_national_id_and_class_conflicts(client: AsyncClient, auth_headers, test_data):
    payload = test_data.record("driving_licenses", "male_holder")

    await client.post("/driving-licenses", json=payload, headers=auth_headers)
    response = await client.post("/driving-licenses", json=payload, headers=auth_headers)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


@pytest.mark.asyncio
async def test_same_person_other_class_is_allowed(client: AsyncClient, auth_headers, test_data):
    payload = test_data.record("driving_licenses", "male_holder")

    await client.post("/driving-licenses", json=payload, headers=auth_headers)
    response = await client.post(
        "/driving-licenses", json=dict(payload, license_class="A"), headers=auth_headers
    )

    assert response.status_code == 201
    assert response.json()["license_number"] == "3201011505900002"


@pytest.mark.asyncio
async def test_minimum_age_failure_names_minimum(client: AsyncClient, auth_headers, test_data):
    payload = test_data.record("driving_licenses", "male_holder")
    payload.update(license_class="BII_UMUM", birth_date="2015-01-01", national_id="3201010101150001")

    response = await client.post("/driving-licenses", json=payload, headers=auth_headers)

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INVALID_INPUT"
    assert "23" in error["message"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field,value",
    [
        ("national_id", "12345"),
        ("license_class", "Z"),
        ("sex", "unknown"),
        ("expiry_date", "2000-01-01"),
        ("birth_date", "2999-01-01"),
        ("rt", "1234"),
    ],
)
async def test_invalid_fields_are_rejected(client: AsyncClient, auth_headers, test_data, field, value):
    payload = test_data.record("driving_licenses", "male_holder")
    payload[field] = value

    response = await client.post("/driving-licenses", json=payload, headers=auth_headers)

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "INVALID_INPUT"
    assert field in {f["path"] for f in error["fields"]}


@pytest.mark.asyncio
async def test_license_number_cannot_be_supplied(client: AsyncClient, auth_headers, test_data):
    payload = test_data.record("driving_licenses", "male_holder")
    payload["license_number"] = "9999999999999999"

    response = await client.post("/driving-licenses", json=payload, headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["license_number"] == "3201011505900001"


@pytest.mark.asyncio
async def test_requires_authentication(client: AsyncClient, test_data):
    payload = test_data.record("driving_licenses", "male_holder")

    response = await client.post("/driving-licenses", json=payload)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_update_list_delete(client: AsyncClient, auth_headers, test_data):
    payload = test_data.record("driving_licenses", "male_holder")
    created = (await client.post("/driving-licenses", json=payload, headers=auth_headers)).json()
    license_id = created["id"]

    fetched = await client.get(f"/driving-licenses/{license_id}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json()["license_number"] == created["license_number"]

    updated = await client.put(
        f"/driving-licenses/{license_id}",
        json={"occupation": "Architect", "license_number": "0000000000000000"},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["occupation"] == "Architect"
    assert updated.json()["license_number"] == created["license_number"]

    listed = await client.get("/driving-licenses?page=1&limit=10", headers=auth_headers)
    assert listed.status_code == 200
    assert listed.json()["pagination"]["total_items"] == 1
    assert listed.json()["data"][0]["id"] == license_id

    deleted = await client.delete(f"/driving-licenses/{license_id}", headers=auth_headers)
    assert deleted.status_code == 204

    missing = await client.get(f"/driving-licenses/{license_id}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_update_to_existing_holder_class_conflicts(client: AsyncClient, auth_headers, test_data):
    payload = test_data.record("driving_licenses", "male_holder")
    await client.post("/driving-licenses", json=payload, headers=auth_headers)
    other = (
        await client.post(
            "/driving-licenses", json=dict(payload, license_class="A"), headers=auth_headers
        )
    ).json()

    response = await client.put(
        f"/driving-licenses/{other['id']}", json={"license_class": "C"}, headers=auth_headers
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_list_limit_is_bounded(client: AsyncClient, auth_headers):
    response = await client.get("/driving-licenses?limit=101", headers=auth_headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_decode_license_number(client: AsyncClient, auth_headers):
    response = await client.get("/driving-licenses/numbers/3201015708950023", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {
        "license_number": "3201015708950023",
        "region": "320101",
        "day": 17,
        "month": 8,
        "year": 2095,
        "sex": "female",
        "sequence": 23,
    }


@pytest.mark.asyncio
async def test_decode_malformed_license_number(client: AsyncClient, auth_headers):
    response = await client.get("/driving-licenses/numbers/12ab", headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_update_cannot_change_encoded_holder_fields(client: AsyncClient, auth_headers, test_data):
    payload = test_data.record("driving_licenses", "male_holder")
    created = (await client.post("/driving-licenses", json=payload, headers=auth_headers)).json()

    response = await client.put(
        f"/driving-licenses/{created['id']}",
        json={"sex": "female", "birth_date": "1985-02-03", "national_id": "9999990000000001"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_INPUT"

    stored = (await client.get(f"/driving-licenses/{created['id']}", headers=auth_headers)).json()
    decoded = (
        await client.get(f"/driving-licenses/numbers/{stored['license_number']}", headers=auth_headers)
    ).json()
    assert stored["license_number"] == created["license_number"]
    assert decoded["sex"] == stored["sex"] == "male"
    assert decoded["region"] == stored["national_id"][:6]
    assert (decoded["day"], decoded["month"]) == (15, 5)
    assert stored["birth_date"] == "1990-05-15"
