from conftest import ORIGIN_LAT, ORIGIN_LNG


def search(client, **params):
    query = {"category": "plumber", "latitude": ORIGIN_LAT, "longitude": ORIGIN_LNG, "radius": 10}
    query.update(params)
    return client.get("/workers/search", params={k: v for k, v in query.items() if v is not None})


class TestAvailability:

    def test_set_availability_returns_updated_worker(self, client, create_worker):
        worker = create_worker("0911000001")
        resp = client.post("/worker/availability", json={"workerId": worker["_id"], "isAvailable": True})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["worker"]["_id"] == worker["_id"]
        assert body["worker"]["isAvailable"] is True
        assert "password" not in body["worker"]
        assert "password_hash" not in body["worker"]

    def test_unknown_worker_is_not_found(self, client):
        resp = client.post("/worker/availability", json={"workerId": "does-not-exist", "isAvailable": True})
        assert resp.status_code == 404
        assert resp.json() == {"success": False, "message": "Worker not found"}

    def test_missing_worker_id_is_bad_request(self, client):
        resp = client.post("/worker/availability", json={"isAvailable": True})
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_non_boolean_flag_is_bad_request(self, client, create_worker):
        worker = create_worker("0911000002")
        for value in ("true", 1, None):
            resp = client.post("/worker/availability", json={"workerId": worker["_id"], "isAvailable": value})
            assert resp.status_code == 400, value
            assert resp.json()["success"] is False

    def test_search_reflects_new_flag_immediately(self, client, create_worker):
        worker = create_worker("0911000003", available=True)
        resp = search(client)
        assert [w["_id"] for w in resp.json()["workers"]] == [worker["_id"]]

        client.post("/worker/availability", json={"workerId": worker["_id"], "isAvailable": False})
        assert search(client).status_code == 404


class TestProximitySearch:

    def test_missing_parameters_are_rejected(self, client):
        for missing in ("category", "latitude", "longitude", "radius"):
            resp = search(client, **{missing: None})
            assert resp.status_code == 400, missing
            assert resp.json()["success"] is False

    def test_non_numeric_coordinates_are_rejected(self, client):
        resp = search(client, latitude="north")
        assert resp.status_code == 400

    def test_non_positive_radius_is_rejected(self, client):
        assert search(client, radius=0).status_code == 400
        assert search(client, radius=-3).status_code == 400

    def test_radius_includes_and_excludes(self, client, create_worker):
        # ~5 km north of the origin
        far = create_worker("0922000001", latitude=ORIGIN_LAT + 0.045, available=True)

        assert search(client, radius=3).status_code == 404

        resp = search(client, radius=6)
        assert resp.status_code == 200
        assert [w["_id"] for w in resp.json()["workers"]] == [far["_id"]]

    def test_results_are_nearest_first(self, client, create_worker):
        # registered far-to-near so insertion order differs from distance order
        far = create_worker("0922000010", latitude=ORIGIN_LAT + 0.045, available=True)
        mid = create_worker("0922000011", longitude=ORIGIN_LNG - 0.03, available=True)
        near = create_worker("0922000012", latitude=ORIGIN_LAT - 0.009, available=True)

        resp = search(client, radius=10)
        assert resp.status_code == 200
        ids = [w["_id"] for w in resp.json()["workers"]]
        assert ids == [near["_id"], mid["_id"], far["_id"]]

    def test_unavailable_and_other_categories_are_excluded(self, client, create_worker):
        available = create_worker("0933000001", latitude=ORIGIN_LAT + 0.002, available=True)
        create_worker("0933000002", latitude=ORIGIN_LAT + 0.001, available=False)
        create_worker("0933000003", category="electrician", available=True)

        resp = search(client)
        assert resp.status_code == 200
        assert [w["_id"] for w in resp.json()["workers"]] == [available["_id"]]

    def test_category_match_is_case_insensitive(self, client, create_worker):
        worker = create_worker("0944000001", category="  Plumber ", available=True)
        assert worker["category"] == "plumber"

        resp = search(client, category="PLUMBER")
        assert resp.status_code == 200
        assert resp.json()["workers"][0]["_id"] == worker["_id"]

    def test_no_match_is_not_found(self, client):
        resp = search(client)
        assert resp.status_code == 404
        assert resp.json() == {
            "success": False,
            "message": "No available workers found in this category and radius.",
        }

    def test_results_embed_full_posts_without_password(self, client, create_worker):
        worker = create_worker("0955000001", available=True)
        client.post("/upload-post", data={"workerId": worker["_id"], "text": "Fixed a leaking sink"})

        resp = search(client)
        assert resp.status_code == 200
        result = resp.json()["workers"][0]
        assert "password" not in result
        assert "password_hash" not in result
        assert len(result["posts"]) == 1
        assert result["posts"][0]["text"] == "Fixed a leaking sink"
        assert result["posts"][0]["workerId"] == worker["_id"]
