"""Integration tests for the /restaurant endpoints and rating aggregation."""

import pytest

from dining_review.config import settings


@pytest.fixture()
def reviewers(register_user):
    register_user("alice")
    register_user("bob")


class TestCreateRestaurant:
    def test_create_restaurant(self, client):
        response = client.post("/restaurant", json={"name": "Pho House", "zipcode": 10001})
        assert response.status_code == 201

        data = response.json()
        assert response.headers["Location"] == f"/restaurant/{data['id']}"
        assert data["name"] == "Pho House"
        assert data["ratingPeanut"] is None
        assert data["ratingEgg"] is None
        assert data["ratingDiary"] is None
        assert data["overallRating"] is None

    def test_client_supplied_ratings_are_dropped(self, client, monkeypatch):
        monkeypatch.setattr(settings, "reaggregate_on_read", False)
        response = client.post(
            "/restaurant",
            json={"name": "Pho House", "zipcode": 10001, "ratingPeanut": 5, "overallRating": 5},
        )
        assert response.status_code == 201
        assert response.json()["overallRating"] is None

        stored = client.get(f"/restaurant/{response.json()['id']}").json()
        assert stored["ratingPeanut"] is None
        assert stored["overallRating"] is None

    def test_duplicate_name_and_zipcode(self, client, create_restaurant):
        create_restaurant("Pho House", 10001)

        response = client.post("/restaurant", json={"name": "Pho House", "zipcode": 10001})
        assert response.status_code == 400
        assert response.headers["X-Error-Code"] == "RESTAURANT_EXISTS"

    def test_same_name_in_another_zipcode(self, client, create_restaurant):
        create_restaurant("Pho House", 10001)

        response = client.post("/restaurant", json={"name": "Pho House", "zipcode": 10002})
        assert response.status_code == 201


class TestGetRestaurant:
    def test_unknown_restaurant(self, client):
        response = client.get("/restaurant/777")
        assert response.status_code == 404
        assert response.headers["X-Error-Code"] == "RESTAURANT_NOT_FOUND"

    def test_aggregates_approved_reviews(self, client, reviewers, create_restaurant, approved_review):
        restaurant = create_restaurant()
        approved_review("alice", restaurant["id"], peanut=4, dairy=2)
        approved_review("bob", restaurant["id"], peanut=2, egg=5)

        data = client.get(f"/restaurant/{restaurant['id']}").json()
        assert data["ratingPeanut"] == 3.0
        assert data["ratingEgg"] == 5.0
        assert data["ratingDiary"] == 2.0
        assert data["overallRating"] == 3.33

    def test_no_approved_reviews(self, client, create_restaurant):
        restaurant = create_restaurant()

        data = client.get(f"/restaurant/{restaurant['id']}").json()
        assert data["ratingPeanut"] == 0.0
        assert data["ratingEgg"] == 0.0
        assert data["ratingDiary"] == 0.0
        assert data["overallRating"] is None

    def test_repeated_reads_are_identical(self, client, reviewers, create_restaurant, approved_review):
        restaurant = create_restaurant()
        approved_review("alice", restaurant["id"], peanut=3, egg=4, dairy=4)

        first = client.get(f"/restaurant/{restaurant['id']}").json()
        second = client.get(f"/restaurant/{restaurant['id']}").json()

        for field in ("ratingPeanut", "ratingEgg", "ratingDiary", "overallRating"):
            assert first[field] == second[field]
        assert first["overallRating"] == 3.67

    def test_read_without_reaggregation(self, client, create_restaurant, monkeypatch):
        monkeypatch.setattr(settings, "reaggregate_on_read", False)
        restaurant = create_restaurant()

        data = client.get(f"/restaurant/{restaurant['id']}").json()
        assert data["ratingPeanut"] is None
        assert data["overallRating"] is None


class TestFilterByZipcodeAndAllergy:
    def test_orders_by_overall_rating_descending(
        self, client, reviewers, create_restaurant, approved_review
    ):
        low = create_restaurant("Low", 10001)
        high = create_restaurant("High", 10001)
        mid = create_restaurant("Mid", 10001)
        approved_review("alice", low["id"], peanut=1)
        approved_review("alice", high["id"], peanut=5)
        approved_review("alice", mid["id"], peanut=3)

        response = client.get("/restaurant/10001/allergy/Peanut")
        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == ["High", "Mid", "Low"]

    def test_excludes_other_zipcodes(self, client, reviewers, create_restaurant, approved_review):
        here = create_restaurant("Here", 10001)
        there = create_restaurant("There", 20002)
        approved_review("alice", here["id"], egg=4)
        approved_review("alice", there["id"], egg=5)

        names = [r["name"] for r in client.get("/restaurant/10001/allergy/Egg").json()]
        assert names == ["Here"]

    def test_never_returns_null_rating(self, client, reviewers, create_restaurant, approved_review):
        rated = create_restaurant("Rated", 10001)
        create_restaurant("Unrated", 10001)
        approved_review("alice", rated["id"], dairy=4)

        for allergy in ("Peanut", "Egg", "Diary"):
            response = client.get(f"/restaurant/10001/allergy/{allergy}")
            assert response.status_code == 200
            for restaurant in response.json():
                assert restaurant[f"rating{allergy}"] is not None
            assert [r["name"] for r in response.json()] == ["Rated"]

    @pytest.mark.parametrize("allergy", ["peanut", "Dairy", "Gluten", "EGG"])
    def test_unknown_allergy_returns_empty_list(
        self, client, reviewers, create_restaurant, approved_review, allergy
    ):
        restaurant = create_restaurant("Rated", 10001)
        approved_review("alice", restaurant["id"], peanut=4, egg=4, dairy=4)

        response = client.get(f"/restaurant/10001/allergy/{allergy}")
        assert response.status_code == 200
        assert response.json() == []

    def test_non_numeric_zipcode(self, client):
        response = client.get("/restaurant/abc/allergy/Peanut")
        assert response.status_code == 422


class TestConcurrentCreation:
    def test_unique_constraint_maps_to_conflict(self, client, create_restaurant, monkeypatch):
        from dining_review.repositories import RestaurantRepository

        create_restaurant("Pho House", 10001)

        async def _none_yet(self, name, zipcode):
            return 0

        # A concurrent writer created the pair after the duplicate count
        monkeypatch.setattr(RestaurantRepository, "count_by_name_and_zipcode", _none_yet)
        response = client.post("/restaurant", json={"name": "Pho House", "zipcode": 10001})
        assert response.status_code == 400
        assert response.headers["X-Error-Code"] == "RESTAURANT_EXISTS"

        monkeypatch.undo()
        assert client.get("/restaurant/10001/allergy/Peanut").json() == []
        assert client.post("/restaurant", json={"name": "Pho House", "zipcode": 10002}).status_code == 201
