def test_health(client):
    rv = client.get("/health")

    assert rv.status_code == 200
    assert rv.json()["status"] == "healthy"


def test_diff_lines(client):
    rv = client.post("/api/diff/lines", json={"left": ["a", "b"], "right": ["a", "b", "c"]})

    assert rv.status_code == 200
    data = rv.json()
    assert [r["kind"] for r in data["records"]] == ["unchanged", "unchanged", "added"]
    assert [r["left_number"] for r in data["records"]] == [1, 2, None]
    assert data["added_count"] == 1
    assert data["approximate"] is False


def test_diff_text(client):
    rv = client.post("/api/diff/text", json={"left": "x\ny", "right": "x\nz"})

    data = rv.json()
    assert data["records"][1] == {
        "kind": "changed",
        "left_line": "y",
        "right_line": "z",
        "left_number": 2,
        "right_number": 2,
    }
    assert data["changed_count"] == 1


def test_diff_json(client):
    rv = client.post(
        "/api/diff/json",
        json={"left": '{"b": 1, "a": 2}', "right": '{"a": 2, "b": 1}', "sort_keys": True},
    )

    assert rv.status_code == 200
    data = rv.json()
    assert data["left"] == data["right"] == '{\n  "a": 2,\n  "b": 1\n}'
    assert data["diff"]["unchanged_count"] == 4


def test_diff_json_uses_configured_sort_default(client):
    client.put("/api/config", json={"json": {"sortKeys": True}})

    rv = client.post("/api/diff/json", json={"left": '{"b": 1, "a": 2}', "right": '{"a": 2, "b": 1}'})

    assert rv.json()["sort_keys"] is True
    assert rv.json()["diff"]["changed_count"] == 0


def test_diff_json_invalid(client):
    rv = client.post("/api/diff/json", json={"left": '{"a": 1}', "right": '{"a": }'})

    assert rv.status_code == 400
    detail = rv.json()["detail"]
    assert detail["left"]["valid"] is True
    assert detail["right"]["valid"] is False
    assert detail["right"]["line"] == 1


def test_validate(client):
    assert client.post("/api/json/validate", json={"text": "[1]"}).json()["valid"] is True

    data = client.post("/api/json/validate", json={"text": "[1"}).json()
    assert data["valid"] is False
    assert data["line"] == 1


def test_format_and_minify(client):
    rv = client.post("/api/json/format", json={"text": '{"b":1,"a":2}', "sort_keys": True})
    assert rv.json()["text"] == '{\n  "a": 2,\n  "b": 1\n}'

    rv = client.post("/api/json/minify", json={"text": '{\n  "b": 1,\n  "a": 2\n}'})
    assert rv.json() == {"text": '{"b":1,"a":2}', "sort_keys": False}


def test_format_invalid(client):
    rv = client.post("/api/json/format", json={"text": ""})

    assert rv.status_code == 400
    assert rv.json()["detail"]["message"] == "Empty document"


def test_config_roundtrip(client):
    rv = client.get("/api/config")
    assert rv.status_code == 200
    assert set(rv.json()) == {"diff", "json", "server"}

    rv = client.put("/api/config", json={"diff": {"maxCells": 0}})
    assert rv.status_code == 200
    assert client.get("/api/config").json()["diff"]["maxCells"] == 0

    # the new ceiling forces the positional fallback
    rv = client.post("/api/diff/lines", json={"left": ["a"], "right": ["b", "a"]})
    assert rv.json()["approximate"] is True


def test_config_rejects_bad_values(client):
    rv = client.put("/api/config", json={"diff": {"maxCells": -1}})

    assert rv.status_code == 422


def test_diff_survives_mistyped_config_file(client, config_dir):
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.json").write_text('{"diff": {"maxCells": "lots"}, "json": "yes"}')

    rv = client.post("/api/diff/lines", json={"left": ["a"], "right": ["a", "b"]})

    assert rv.status_code == 200
    assert rv.json()["approximate"] is False

    rv = client.post("/api/diff/json", json={"left": "", "right": "{}"})
    assert rv.status_code == 200
    assert rv.json()["left"] == "{}"


def test_format_rejects_overflowing_number(client):
    rv = client.post("/api/json/format", json={"text": "[1e400]"})

    assert rv.status_code == 400
