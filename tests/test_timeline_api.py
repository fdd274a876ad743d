def _seed(client):
    client.post("/api/user", json={"name": "Alice", "birthdate": "1990-05-01"})
    ids = {}
    for title, category, start in [
        ("Graduated", "Education", "2012-06-01"),
        ("Started job", "Work", "2015-06-01"),
        ("Trip to Japan", "Travel", "2019-04-10"),
    ]:
        response = client.post(
            "/api/events",
            json={"title": title, "category": category, "type": "point", "start": start},
        )
        ids[title] = response.json()["event"]["id"]
    return ids


def test_timeline_renders_both_views(client):
    _seed(client)

    view = client.get("/api/timeline").json()

    assert view["orientation"] == "horizontal"
    assert [item["content"] for item in view["horizontal"]["items"]] == [
        "Graduated",
        "Started job",
        "Trip to Japan",
    ]
    assert [entry["title"] for entry in view["vertical"]["entries"]] == [
        "Trip to Japan",
        "Started job",
        "Graduated",
    ]
    assert view["horizontal"]["options"]["start"] == "1990-05-01"
    assert "end" not in view["horizontal"]["items"][0]


def test_timeline_hides_categories(client):
    _seed(client)

    view = client.get(
        "/api/timeline", params=[("hidden", "Work"), ("hidden", "Travel"), ("orientation", "vertical")]
    ).json()

    assert view["orientation"] == "vertical"
    assert [item["content"] for item in view["horizontal"]["items"]] == ["Graduated"]
    assert [entry["title"] for entry in view["vertical"]["entries"]] == ["Graduated"]


def test_timeline_marks_selection(client):
    ids = _seed(client)

    view = client.get("/api/timeline", params={"selected": ids["Started job"]}).json()

    assert view["horizontal"]["selection"] == [ids["Started job"]]


def test_timeline_invalid_orientation_is_400(client):
    assert client.get("/api/timeline", params={"orientation": "diagonal"}).status_code == 400
