"""
Transaction CRUD over HTTP, including owner scoping of single and bulk operations.
"""

import pytest

from conftest import auth_headers


def make_tx(**overrides):
    tx = {
        "date": "2024-03-01",
        "type": "EXPENSE",
        "category": "Food",
        "amount": 42.5,
        "paymentMethod": "CARD",
        "bankAccountId": "bank-1",
        "bankName": "Acme Bank",
        "description": "Team lunch",
        "investmentType": "TEAM",
        "investors": ["Alice", "Bob"],
    }
    tx.update(overrides)
    return tx


@pytest.fixture
def post_tx(client):
    def _post(token, **overrides):
        r = client.post("/api/transactions", json=make_tx(**overrides), headers=auth_headers(token))
        assert r.status_code == 200, r.text
        return r.json()

    return _post


def list_tx(client, token):
    r = client.get("/api/transactions", headers=auth_headers(token))
    assert r.status_code == 200
    return r.json()


class TestCreateAndList:
    def test_round_trip_adds_owner_fields(self, client, alice, post_tx):
        fields = make_tx()
        created = post_tx(alice["token"])

        [stored] = list_tx(client, alice["token"])
        assert stored == created
        for key, value in fields.items():
            assert stored[key] == value
        assert stored["userId"] == alice["user"]["id"]
        assert stored["userName"] == "Alice"
        assert isinstance(stored["id"], str) and stored["id"]
        assert stored["createdAt"]

    def test_defaults(self, client, alice):
        body = {"date": "2024-01-01", "type": "INCOME", "category": "Salary",
                "amount": 1000, "paymentMethod": "BANK"}
        r = client.post("/api/transactions", json=body, headers=auth_headers(alice["token"]))
        assert r.status_code == 200
        tx = r.json()
        assert tx["investmentType"] == "SINGLE"
        assert tx["investors"] == []
        assert tx["description"] == ""
        assert tx["bankAccountId"] is None

    def test_client_cannot_choose_owner(self, client, alice, bob, post_tx):
        tx = post_tx(alice["token"], userId=bob["user"]["id"], userName="Bob")
        assert tx["userId"] == alice["user"]["id"]
        assert tx["userName"] == "Alice"
        assert list_tx(client, bob["token"]) == []

    def test_newest_date_first(self, client, alice, post_tx):
        for day in ("2024-01-15", "2024-03-02", "2023-12-31"):
            post_tx(alice["token"], date=day)
        dates = [tx["date"] for tx in list_tx(client, alice["token"])]
        assert dates == ["2024-03-02", "2024-01-15", "2023-12-31"]

    def test_negative_amount_is_accepted(self, alice, post_tx):
        assert post_tx(alice["token"], amount=-7.25)["amount"] == -7.25

    def test_unknown_type_is_rejected(self, client, alice):
        r = client.post("/api/transactions", json=make_tx(type="GIFT"), headers=auth_headers(alice["token"]))
        assert r.status_code == 400
        assert "error" in r.json()

    def test_missing_required_field_is_rejected(self, client, alice):
        body = make_tx()
        del body["category"]
        r = client.post("/api/transactions", json=body, headers=auth_headers(alice["token"]))
        assert r.status_code == 400


class TestUpdate:
    def test_partial_update(self, client, alice, post_tx):
        tx = post_tx(alice["token"])
        r = client.put(f"/api/transactions/{tx['id']}", json={"category": "Travel", "amount": 10},
                       headers=auth_headers(alice["token"]))
        assert r.json() == {"success": True}

        [stored] = list_tx(client, alice["token"])
        assert stored["category"] == "Travel"
        assert stored["amount"] == 10
        assert stored["description"] == "Team lunch"

    def test_owner_fields_cannot_be_reassigned(self, client, alice, bob, post_tx):
        tx = post_tx(alice["token"])
        client.put(f"/api/transactions/{tx['id']}", json={"userId": bob["user"]["id"], "category": "Moved"},
                   headers=auth_headers(alice["token"]))
        [stored] = list_tx(client, alice["token"])
        assert stored["userId"] == alice["user"]["id"]
        assert stored["category"] == "Moved"
        assert list_tx(client, bob["token"]) == []

    def test_unknown_id_is_a_silent_no_op(self, client, alice):
        r = client.put("/api/transactions/does-not-exist", json={"category": "X"},
                       headers=auth_headers(alice["token"]))
        assert r.status_code == 200
        assert r.json() == {"success": True}


class TestDelete:
    def test_delete_is_idempotent(self, client, alice, post_tx):
        tx = post_tx(alice["token"])
        for _ in range(2):
            r = client.delete(f"/api/transactions/{tx['id']}", headers=auth_headers(alice["token"]))
            assert r.status_code == 200
            assert r.json() == {"success": True}
        assert list_tx(client, alice["token"]) == []

    def test_bulk_delete(self, client, alice, post_tx):
        keep = post_tx(alice["token"], category="Keep")
        drop = [post_tx(alice["token"])["id"] for _ in range(2)]
        r = client.post("/api/transactions/bulk-delete", json={"ids": drop + ["missing"]},
                        headers=auth_headers(alice["token"]))
        assert r.json() == {"success": True}
        assert [tx["id"] for tx in list_tx(client, alice["token"])] == [keep["id"]]

    def test_bulk_delete_empty_batch(self, client, alice, post_tx):
        post_tx(alice["token"])
        r = client.post("/api/transactions/bulk-delete", json={"ids": []}, headers=auth_headers(alice["token"]))
        assert r.json() == {"success": True}
        assert len(list_tx(client, alice["token"])) == 1


class TestCrossTenantIsolation:
    def test_list_only_shows_own(self, client, alice, bob, post_tx):
        post_tx(alice["token"])
        post_tx(bob["token"], category="Bob stuff")
        assert [tx["category"] for tx in list_tx(client, alice["token"])] == ["Food"]
        assert [tx["category"] for tx in list_tx(client, bob["token"])] == ["Bob stuff"]

    def test_cannot_update_or_delete_foreign(self, client, alice, bob, post_tx):
        tx = post_tx(bob["token"])
        put = client.put(f"/api/transactions/{tx['id']}", json={"category": "Hijacked"},
                         headers=auth_headers(alice["token"]))
        delete = client.delete(f"/api/transactions/{tx['id']}", headers=auth_headers(alice["token"]))
        assert put.json() == delete.json() == {"success": True}

        [stored] = list_tx(client, bob["token"])
        assert stored["category"] == "Food"

    def test_bulk_category_only_touches_owned(self, client, alice, bob, post_tx):
        mine = [post_tx(alice["token"])["id"] for _ in range(2)]
        theirs = post_tx(bob["token"])["id"]

        r = client.post("/api/transactions/bulk-category",
                        json={"ids": mine + [theirs], "category": "Office"},
                        headers=auth_headers(alice["token"]))
        assert r.json() == {"success": True}

        assert {tx["category"] for tx in list_tx(client, alice["token"])} == {"Office"}
        assert [tx["category"] for tx in list_tx(client, bob["token"])] == ["Food"]

    def test_bulk_delete_only_touches_owned(self, client, alice, bob, post_tx):
        mine = post_tx(alice["token"])["id"]
        theirs = post_tx(bob["token"])["id"]
        client.post("/api/transactions/bulk-delete", json={"ids": [mine, theirs]},
                    headers=auth_headers(alice["token"]))
        assert list_tx(client, alice["token"]) == []
        assert [tx["id"] for tx in list_tx(client, bob["token"])] == [theirs]
