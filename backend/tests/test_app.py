from types import SimpleNamespace

import pytest

import app as app_module
from jugbfs.llm import explainer


@pytest.fixture
def client():
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c


def test_index_lists_endpoints(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "POST /solve" in resp.get_json()["endpoints"]


def test_solve_returns_steps(client):
    resp = client.post("/solve", json={"capA": 4, "capB": 3, "goal": 2})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["solvable"] is True
    assert body["transitions"] == 6
    assert [s["action"] for s in body["steps"]][:2] == ["Start", "Fill A"]
    assert body["steps"][-1]["a"] == 2
    assert body["steps"][1]["logic"][0] == "Dequeued parent state (0, 0)."


def test_solve_accepts_integer_strings(client):
    resp = client.post("/solve", json={"capA": "5", "capB": "3", "goal": "4"})
    assert resp.status_code == 200
    assert resp.get_json()["steps"][-1]["a"] == 4


def test_no_solution_is_not_an_error(client):
    resp = client.post("/solve", json={"capA": 3, "capB": 3, "goal": 2})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["solvable"] is False
    assert body["steps"] is None
    assert body["message"] == "No solution possible for these parameters."


@pytest.mark.parametrize("payload,detail", [
    ({"capA": 4, "capB": 3, "goal": 9}, "largest jug"),
    ({"capA": 0, "capB": 3, "goal": 2}, "must be positive"),
    ({"capA": 4, "capB": 3}, "Missing parameters: goal"),
    ({"capA": "x", "capB": 3, "goal": 1}, "integers"),
])
def test_invalid_parameters(client, payload, detail):
    resp = client.post("/solve", json=payload)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "Invalid parameters"
    assert detail in body["details"]


def test_non_json_body(client):
    resp = client.post("/solve", data="capA=4", content_type="text/plain")
    assert resp.status_code == 400


def test_explain_without_key(client, monkeypatch):
    monkeypatch.setattr(explainer, "genai_client", None)
    resp = client.post("/explain", json={"capA": 4, "capB": 3, "goal": 2})
    assert resp.status_code == 200
    assert resp.get_json()["explanation"] == "API Key not configured."


def test_explain_uses_supplied_steps(client, monkeypatch):
    calls = []

    def generate_content(model, contents, config=None):
        calls.append(contents)
        return SimpleNamespace(text="Pour and refill.")

    fake = SimpleNamespace(models=SimpleNamespace(generate_content=generate_content))
    monkeypatch.setattr(explainer, "genai_client", fake)

    steps = [
        {"a": 0, "b": 0, "action": "Start"},
        {"a": 4, "b": 0, "action": "Fill A"},
    ]
    resp = client.post("/explain", json={"capA": 4, "capB": 3, "goal": 4, "steps": steps})
    assert resp.status_code == 200
    assert resp.get_json()["explanation"] == "Pour and refill."
    assert "2. Fill A (A=4, B=0)" in calls[0]


def test_explain_rejects_malformed_steps(client):
    resp = client.post("/explain", json={"capA": 4, "capB": 3, "goal": 2, "steps": [{"a": 1}]})
    assert resp.status_code == 400


def test_explain_unsolvable(client):
    resp = client.post("/explain", json={"capA": 3, "capB": 3, "goal": 2})
    assert resp.status_code == 422
    assert resp.get_json()["error"] == "No solution to explain"


def test_algorithm_source(client):
    resp = client.get("/algorithm")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["source"].startswith("def search(")
    assert body["pseudocode"][0].startswith("def search")


@pytest.mark.parametrize("payload,detail", [
    ({"capA": 4, "capB": 3, "goal": 99}, "largest jug"),
    ({"capA": 0, "capB": 3, "goal": 0}, "must be positive"),
    ({"capA": 1001, "capB": 3, "goal": 2}, "cannot exceed 1000L"),
])
def test_explain_validates_params_when_steps_supplied(client, monkeypatch, payload, detail):
    monkeypatch.setattr(explainer, "genai_client", None)
    body = dict(payload, steps=[{"a": 0, "b": 0, "action": "Start"}])
    resp = client.post("/explain", json=body)
    assert resp.status_code == 400
    assert detail in resp.get_json()["details"]


@pytest.mark.parametrize("steps,detail", [
    ([{"a": 4, "b": 0, "action": "Fill A"}], "Start state"),
    ([{"a": 0, "b": 0, "action": "Start"}, {"a": 2, "b": 0, "action": "Fill A"}], "not a legal move"),
    ([{"a": 0, "b": 0, "action": "Start"}, {"a": 0, "b": 3, "action": "Fill B"}], "goal amount"),
    ([{"a": "0", "b": 0, "action": "Start"}], "integer a and b"),
])
def test_explain_rejects_steps_that_are_not_a_path(client, monkeypatch, steps, detail):
    monkeypatch.setattr(explainer, "genai_client", None)
    resp = client.post("/explain", json={"capA": 4, "capB": 3, "goal": 4, "steps": steps})
    assert resp.status_code == 400
    assert detail in resp.get_json()["details"]


def test_explain_accepts_steps_from_solve(client, monkeypatch):
    monkeypatch.setattr(explainer, "genai_client", None)
    steps = client.post("/solve", json={"capA": 4, "capB": 3, "goal": 2}).get_json()["steps"]
    resp = client.post("/explain", json={"capA": 4, "capB": 3, "goal": 2, "steps": steps})
    assert resp.status_code == 200


def test_solve_enforces_default_capacity_ceiling(client):
    resp = client.post("/solve", json={"capA": 1001, "capB": 3, "goal": 2})
    assert resp.status_code == 400
    assert "cannot exceed 1000L" in resp.get_json()["details"]


def test_unexpected_error_returns_500(client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("queue exploded")

    monkeypatch.setattr(app_module, "solve_puzzle", boom)
    resp = client.post("/solve", json={"capA": 4, "capB": 3, "goal": 2})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal server error", "details": "queue exploded"}
