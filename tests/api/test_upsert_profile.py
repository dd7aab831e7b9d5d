"""Create-or-update profile - POST /api/profile.

Invariants:
    - First call creates, later calls update the same row (never a second profile)
    - Fields omitted on update keep their previous values, social links included
    - skills stored as a trimmed list
    - Missing status/skills -> 400 with field details, nothing written
    - No bearer token -> 401
"""

from sqlalchemy import func, select

from devconnect.models.profile import Profile

PROFILE_FORM = {
    "status": "Developer",
    "skills": "python, fastapi ,sql",
    "company": "Acme",
    "twitter": "https://twitter.com/jane",
}


async def _profile_count(test_db) -> int:
    result = await test_db.execute(select(func.count()).select_from(Profile))
    return result.scalar_one()


async def test_upsert_creates_profile(client, auth_headers):
    res = await client.post("/api/profile", json=PROFILE_FORM, headers=auth_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Developer"
    assert body["company"] == "Acme"
    assert body["user"]["name"] == "Jane Dev"
    assert body["user"]["avatar"].startswith("//www.gravatar.com/avatar/")
    assert body["social"]["twitter"] == "https://twitter.com/jane"
    assert body["social"]["youtube"] is None


async def test_upsert_trims_skills(client, auth_headers):
    form = dict(PROFILE_FORM, skills="a, b ,c")
    res = await client.post("/api/profile", json=form, headers=auth_headers)
    assert res.json()["skills"] == ["a", "b", "c"]


async def test_upsert_accepts_skills_list(client, auth_headers):
    form = dict(PROFILE_FORM, skills=[" go", "rust "])
    res = await client.post("/api/profile", json=form, headers=auth_headers)
    assert res.json()["skills"] == ["go", "rust"]


async def test_second_upsert_updates_single_profile(client, auth_headers, test_db):
    first = await client.post("/api/profile", json=PROFILE_FORM, headers=auth_headers)
    second = await client.post(
        "/api/profile",
        json={"status": "Senior Developer", "skills": "go", "youtube": "yt/jane"},
        headers=auth_headers,
    )
    assert second.status_code == 200
    body = second.json()
    assert body["id"] == first.json()["id"]
    assert body["status"] == "Senior Developer"
    assert body["skills"] == ["go"]
    # omitted on the second call, so retained
    assert body["company"] == "Acme"
    assert body["social"]["twitter"] == "https://twitter.com/jane"
    assert body["social"]["youtube"] == "yt/jane"
    assert await _profile_count(test_db) == 1


async def test_empty_string_does_not_clear_field(client, auth_headers):
    await client.post("/api/profile", json=PROFILE_FORM, headers=auth_headers)
    res = await client.post(
        "/api/profile",
        json={"status": "Developer", "skills": "python", "company": ""},
        headers=auth_headers,
    )
    assert res.json()["company"] == "Acme"


async def test_upsert_requires_status_and_skills(client, auth_headers, test_db):
    res = await client.post(
        "/api/profile", json={"company": "Acme"}, headers=auth_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"] == [
        {"field": "status", "message": "Status is required"},
        {"field": "skills", "message": "Skills is required"},
    ]
    assert await _profile_count(test_db) == 0


async def test_upsert_treats_blank_skills_as_missing(client, auth_headers):
    res = await client.post(
        "/api/profile",
        json={"status": "Developer", "skills": " , "},
        headers=auth_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "skills"


async def test_upsert_without_token_is_401(client):
    res = await client.post("/api/profile", json=PROFILE_FORM)
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "No token, authorization denied"


async def test_upsert_with_bad_token_is_401(client):
    res = await client.post(
        "/api/profile", json=PROFILE_FORM,
        headers={"Authorization": "Bearer not.a.token"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_TOKEN"
