"""Tests for the HTTP front-end"""

from fastapi.testclient import TestClient

from nfaviz.main import app


client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_formats():
    data = client.get("/formats").json()
    assert set(data["formats"]) == {"penrose", "mermaid", "d2", "json"}
    assert data["default"] in data["formats"]


def test_compile_pattern():
    response = client.post("/compile", json={"pattern": "a|", "output_format": "mermaid"})
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "success"
    assert data["diagram"]["type"] == "mermaid"
    assert data["diagram"]["source"].startswith("flowchart RL")
    assert data["nfa"]["start"] == 5
    assert data["nfa"]["nodes"][4] == {"kind": "split", "next1": 2, "next2": 3}
    assert len(data["ir"]["edges"]) == 6
    assert data["validation"]["is_valid"] is True


def test_compile_bad_pattern():
    response = client.post("/compile", json={"pattern": "a{2,1}"})
    assert response.status_code == 422
    data = response.json()
    assert data["status"] == "error"
    assert data["errors"][0]["level"] == "parse"


def test_visualize_nfa_document():
    body = {
        "output_format": "penrose",
        "nfa": {
            "start": 2,
            "nodes": [
                {"kind": "done"},
                {"kind": "sparse", "char_class": "\\w", "next": 0},
                {"kind": "anchor", "anchor": "start", "next": 1},
            ],
        },
    }
    response = client.post("/visualize", json=body)
    assert response.status_code == 200

    data = response.json()
    assert 'Label e0 "\\\\w"' in data["diagram"]["source"]
    assert 'Label e1 "start"' in data["diagram"]["source"]
    assert [n["label"] for n in data["ir"]["nodes"]] == ["done", "sparse 0", "anchor 1"]


def test_visualize_reports_warnings():
    body = {"nfa": {"start": 1, "nodes": [{"kind": "done"}, {"kind": "epsilon", "next": 0}, {"kind": "fail"}]}}
    data = client.post("/visualize", json=body).json()

    assert data["status"] == "warning"
    codes = [i["code"] for i in data["validation"]["issues"]]
    assert codes == ["UNREACHABLE_NODE"]


def test_visualize_dangling_reference():
    body = {"nfa": {"start": 1, "nodes": [{"kind": "done"}, {"kind": "char", "char": "a", "next": 2}]}}
    response = client.post("/visualize", json=body)

    assert response.status_code == 422
    data = response.json()
    assert data["validation"]["issues"][0]["code"] == "TARGET_OUT_OF_RANGE"
    assert data["validation"]["issues"][0]["node_index"] == 1


def test_visualize_bad_class_expression():
    body = {"nfa": {"start": 0, "nodes": [{"kind": "sparse", "char_class": "[", "next": 0}]}}
    response = client.post("/visualize", json=body)
    assert response.status_code == 422
    assert "char_class" in response.json()["errors"][0]["message"]


def test_visualize_schema_violation():
    body = {"nfa": {"start": 0, "nodes": [{"kind": "teleport"}]}}
    response = client.post("/visualize", json=body)
    assert response.status_code == 422


def test_compile_deeply_nested_pattern():
    pattern = "(" * 200 + "a" + ")" * 200
    response = client.post("/compile", json={"pattern": pattern})

    assert response.status_code == 422
    assert response.json()["errors"][0]["level"] == "parse"


def test_compile_pattern_that_expands_too_far():
    response = client.post("/compile", json={"pattern": "(?:(?:a{1000}){1000}){1000}"})

    assert response.status_code == 422
    error = response.json()["errors"][0]
    assert error["level"] == "compile"
    assert "NFA nodes" in error["message"]
