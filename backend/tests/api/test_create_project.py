"""Create Project - POST /projects/create with form fields ID, Name, Description.

Invariants:
    - Success -> 200 text/plain confirmation with rows affected
    - Missing/empty Name or Description, bad ID -> 400 and nothing inserted
    - Duplicate ID -> 500 and the existing row is untouched
"""

import pytest


async def test_inserts_row_with_caller_supplied_id(client, fetch_projects):
    res = await client.post(
        "/projects/create",
        data={"ID": "42", "Name": "Create TODO6", "Description": "Create TODO basic structure6"},
    )
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == 'Project "Create TODO6" created successfully (1 row affected)'

    rows = await fetch_projects()
    assert [(p.id, p.name, p.description) for p in rows] == [
        (42, "Create TODO6", "Create TODO basic structure6"),
    ]


@pytest.mark.parametrize("missing", ["Name", "Description"])
async def test_missing_field_returns_400_without_insert(client, fetch_projects, missing):
    data = {"ID": "5", "Name": "A", "Description": "B"}
    del data[missing]

    res = await client.post("/projects/create", data=data)

    assert res.status_code == 400
    assert await fetch_projects() == []


@pytest.mark.parametrize("empty", ["Name", "Description"])
async def test_empty_field_returns_400_without_insert(client, fetch_projects, empty):
    data = {"ID": "5", "Name": "A", "Description": "B"}
    data[empty] = ""

    res = await client.post("/projects/create", data=data)

    assert res.status_code == 400
    assert await fetch_projects() == []


@pytest.mark.parametrize("raw_id", ["", "abc", "9223372036854775808"])
async def test_bad_id_returns_400(client, fetch_projects, raw_id):
    res = await client.post(
        "/projects/create", data={"ID": raw_id, "Name": "A", "Description": "B"},
    )
    assert res.status_code == 400
    assert await fetch_projects() == []


async def test_name_longer_than_column_returns_400(client, fetch_projects):
    res = await client.post(
        "/projects/create", data={"ID": "1", "Name": "x" * 501, "Description": "B"},
    )
    assert res.status_code == 400
    assert await fetch_projects() == []


async def test_duplicate_id_returns_500_and_keeps_existing_row(
    client, seed_projects, fetch_projects,
):
    res = await client.post(
        "/projects/create", data={"ID": "1", "Name": "Other", "Description": "Other"},
    )

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "DATABASE_ERROR"
    rows = await fetch_projects()
    assert len(rows) == 3
    assert rows[0].name == "Create TODO1"


async def test_name_with_quotes_is_not_json_escaped(client):
    res = await client.post(
        "/projects/create", data={"ID": "3", "Name": 'Say "hi"', "Description": "B"},
    )
    assert res.text == 'Project "Say "hi"" created successfully (1 row affected)'
