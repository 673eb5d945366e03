import uuid

import pytest


@pytest.fixture
async def chat(client, register, create_group):
    owner = await register("alice")
    member = await register("bob")
    outsider = await register("carol")
    group = await create_group("g1", owner["id"])
    await client.post(f"/groups/{group['id']}/join", json={"user_id": member["id"]})
    return {"owner": owner, "member": member, "outsider": outsider, "group": group}


async def post(client, user, group, content):
    return await client.post(
        "/messages",
        json={"user_id": user["id"], "group_id": group["id"], "content": content},
    )


async def test_post_message(client, chat):
    response = await post(client, chat["member"], chat["group"], "hi")
    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["id"], int)
    assert body["content"] == "hi"
    assert body["user_id"] == chat["member"]["id"]
    assert body["group_id"] == chat["group"]["id"]
    assert "created_at" in body


async def test_post_escapes_html(client, chat):
    response = await post(client, chat["owner"], chat["group"], "<script>alert('x')</script>")
    assert response.json()["content"] == "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;"


async def test_post_validation(client, chat):
    user_id, group_id = chat["owner"]["id"], chat["group"]["id"]
    cases = [
        ({"group_id": group_id, "content": "hi"}, "User ID is required"),
        ({"user_id": user_id, "content": "hi"}, "Group ID is required"),
        ({"user_id": user_id, "group_id": group_id}, "Message content is required"),
        ({"user_id": user_id, "group_id": group_id, "content": "  "}, "Message content is required"),
    ]
    for payload, error in cases:
        response = await client.post("/messages", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": error}


async def test_post_by_non_member_is_forbidden(client, chat):
    response = await post(client, chat["outsider"], chat["group"], "let me in")
    assert response.status_code == 403
    assert response.json() == {"error": "User is not a member of this group"}


async def test_post_unknown_user_or_group(client, chat):
    response = await post(client, {"id": str(uuid.uuid4())}, chat["group"], "hi")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}

    response = await post(client, chat["owner"], {"id": 9999}, "hi")
    assert response.status_code == 404
    assert response.json() == {"error": "Group not found"}


async def test_list_messages_newest_first_with_author(client, chat):
    for i, user in enumerate([chat["owner"], chat["member"], chat["owner"]]):
        await post(client, user, chat["group"], f"message {i}")

    response = await client.get(
        f"/groups/{chat['group']['id']}/messages", params={"user_id": chat["member"]["id"]}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["group_id"] == chat["group"]["id"]
    assert [m["content"] for m in body["messages"]] == ["message 2", "message 1", "message 0"]
    assert body["messages"][1]["user"] == {"id": chat["member"]["id"], "username": "bob"}
    assert body["pagination"]["total_messages"] == 3


async def test_list_messages_paginates(client, chat):
    for i in range(5):
        await post(client, chat["owner"], chat["group"], f"m{i}")

    response = await client.get(
        f"/groups/{chat['group']['id']}/messages",
        params={"user_id": chat["owner"]["id"], "page": 3, "limit": 2},
    )
    body = response.json()
    assert [m["content"] for m in body["messages"]] == ["m0"]
    assert body["pagination"] == {
        "total_messages": 5,
        "current_page": 3,
        "per_page": 2,
        "total_pages": 3,
        "has_next_page": False,
        "has_previous_page": True,
    }


async def test_list_messages_requires_membership(client, chat):
    url = f"/groups/{chat['group']['id']}/messages"

    response = await client.get(url)
    assert response.status_code == 400
    assert response.json() == {"error": "User ID is required"}

    response = await client.get(url, params={"user_id": chat["outsider"]["id"]})
    assert response.status_code == 403

    response = await client.get(url, params={"user_id": str(uuid.uuid4())})
    assert response.status_code == 404

    response = await client.get("/groups/9999/messages", params={"user_id": chat["owner"]["id"]})
    assert response.status_code == 404
    assert response.json() == {"error": "Group not found"}


async def test_listed_timestamps_match_posted_ones(client, chat):
    posted = (await post(client, chat["owner"], chat["group"], "hello")).json()
    response = await client.get(
        f"/groups/{chat['group']['id']}/messages", params={"user_id": chat["owner"]["id"]}
    )
    assert response.json()["messages"][0]["created_at"] == posted["created_at"]
