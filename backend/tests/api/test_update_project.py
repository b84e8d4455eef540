"""Update Project - PUT /projects/update replaces name and description of one row."""


async def test_updates_only_the_targeted_row(client, seed_projects, fetch_projects):
    res = await client.put(
        "/projects/update",
        data={"ID": "2", "Name": "Create TODO667", "Description": "Create TODO basic structure667"},
    )

    assert res.status_code == 200
    assert res.text == "Project 2 updated successfully (1 row affected)"
    rows = await fetch_projects()
    assert [(p.id, p.name, p.description) for p in rows] == [
        (1, "Create TODO1", "Create TODO basic structure1"),
        (2, "Create TODO667", "Create TODO basic structure667"),
        (3, "Create TODO3", "Create TODO basic structure3"),
    ]


async def test_unknown_id_is_a_noop_success(client, seed_projects, fetch_projects):
    res = await client.put(
        "/projects/update", data={"ID": "99", "Name": "A", "Description": "B"},
    )

    assert res.status_code == 200
    assert res.text == "Project 99 updated successfully (0 row affected)"
    assert len(await fetch_projects()) == 3


async def test_empty_description_returns_400_and_keeps_row(
    client, seed_projects, fetch_projects,
):
    res = await client.put(
        "/projects/update", data={"ID": "1", "Name": "A", "Description": ""},
    )

    assert res.status_code == 400
    rows = await fetch_projects()
    assert rows[0].description == "Create TODO basic structure1"


async def test_unparsable_id_returns_400(client):
    res = await client.put(
        "/projects/update", data={"ID": "one", "Name": "A", "Description": "B"},
    )
    assert res.status_code == 400
