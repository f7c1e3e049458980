# tests/services/test_families_users_api.py
from __future__ import annotations

from http import HTTPStatus


def _create_family(api_client, as_user, uid="mom", name="Parkers"):
    r = api_client.post("/api/families", json={"name": name}, headers=as_user(uid))
    assert r.status_code == HTTPStatus.CREATED, r.text
    return r.json()


def test_profile_round_trip(api_client, as_user):
    assert api_client.get("/api/users/me", headers=as_user("u1")).status_code == HTTPStatus.NOT_FOUND

    r = api_client.put("/api/users/me", json={"display_name": "Lee", "favorite_genres": ["noir"]}, headers=as_user("u1"))
    assert r.status_code == HTTPStatus.OK, r.text
    assert r.json()["display_name"] == "Lee"

    assert api_client.get("/api/users/u1", headers=as_user("u2")).json()["favorite_genres"] == ["noir"]
    found = api_client.get("/api/users", params={"name": "Lee"}, headers=as_user("u2")).json()
    assert [u["uid"] for u in found] == ["u1"]


def test_family_lifecycle(api_client, as_user):
    fam = _create_family(api_client, as_user)
    fid = fam["id"]
    assert fam["member_ids"] == ["mom"]
    assert fam["settings"]["privacy_level"] == "private"

    r = api_client.post(f"/api/families/{fid}/members", json={"user_id": "kid", "role": "child"}, headers=as_user("mom"))
    assert r.status_code == HTTPStatus.CREATED, r.text

    r = api_client.post(f"/api/families/{fid}/members", json={"user_id": "kid", "role": "child"}, headers=as_user("mom"))
    assert r.status_code == HTTPStatus.CONFLICT

    members = api_client.get(f"/api/families/{fid}/members", headers=as_user("kid")).json()
    assert {m["user_id"]: m["role"] for m in members} == {"mom": "parent", "kid": "child"}

    r = api_client.patch(f"/api/families/{fid}/members/kid", json={"role": "sibling"}, headers=as_user("mom"))
    assert r.json()["role"] == "sibling"

    r = api_client.put(f"/api/families/{fid}/settings", json={"privacy_level": "family-only"}, headers=as_user("mom"))
    assert r.json()["settings"]["privacy_level"] == "family-only"
    assert r.json()["settings"]["allow_child_rankings"] is True

    r = api_client.patch(f"/api/families/{fid}", json={"description": "movie nights"}, headers=as_user("kid"))
    assert r.json()["description"] == "movie nights"

    mine = api_client.get("/api/families/by-role/parent", headers=as_user("mom")).json()
    assert [f["id"] for f in mine] == [fid]

    assert api_client.delete(f"/api/families/{fid}", headers=as_user("kid")).status_code == HTTPStatus.FORBIDDEN
    assert api_client.delete(f"/api/families/{fid}/members/kid", headers=as_user("mom")).status_code == 204
    assert api_client.delete(f"/api/families/{fid}", headers=as_user("mom")).status_code == 204
    assert api_client.get(f"/api/families/{fid}", headers=as_user("mom")).status_code == HTTPStatus.NOT_FOUND


def test_non_members_are_forbidden(api_client, as_user):
    fid = _create_family(api_client, as_user)["id"]
    assert api_client.get(f"/api/families/{fid}", headers=as_user("stranger")).status_code == HTTPStatus.FORBIDDEN
    r = api_client.post(f"/api/families/{fid}/members", json={"user_id": "stranger"}, headers=as_user("stranger"))
    assert r.status_code == HTTPStatus.FORBIDDEN


def test_list_my_families(api_client, as_user):
    _create_family(api_client, as_user, name="A")
    _create_family(api_client, as_user, name="B")
    names = {f["name"] for f in api_client.get("/api/families", headers=as_user("mom")).json()}
    assert names == {"A", "B"}
    assert api_client.get("/api/families", headers=as_user("nobody")).json() == []
