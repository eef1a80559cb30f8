# tests/test_system.py
def _sample(text, name):
    for line in text.splitlines():
        if line.startswith(name + " "):
            return float(line.split()[1])
    raise AssertionError(f"{name} not found in metrics output")


def test_health(client):
    r = client.get("/health")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["version"] == "2.3.4"
    assert body["mongo"] == "connected"
    assert body["hostname"] == "test-host"
    assert body["environment"] == "test"
    assert isinstance(body["uptime"], int)
    assert body["uptime"] >= 0


def test_health_without_database(degraded_client):
    r = degraded_client.get("/health")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["mongo"] == "disconnected"


def test_metrics_format(client):
    r = client.get("/metrics")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    text = r.text
    for name, kind in (
        ("http_requests_total", "counter"),
        ("http_errors_total", "counter"),
        ("app_uptime_seconds", "gauge"),
        ("process_memory_bytes", "gauge"),
    ):
        assert f"# HELP {name} " in text
        assert f"# TYPE {name} {kind}" in text
    assert _sample(text, "process_memory_bytes") > 0
    assert _sample(text, "app_uptime_seconds") >= 0


def test_metrics_counts_requests(client):
    before = _sample(client.get("/metrics").text, "http_requests_total")
    assert before >= 1

    client.get("/health")
    client.get("/api/tasks")
    client.get("/no-such-route")

    after = _sample(client.get("/metrics").text, "http_requests_total")
    assert after == before + 4


def test_metrics_counts_handler_errors(client):
    errors_before = _sample(client.get("/metrics").text, "http_errors_total")

    client.post("/api/tasks", json={})
    client.delete("/api/tasks/does-not-exist")
    client.get("/no-such-route")

    errors_after = _sample(client.get("/metrics").text, "http_errors_total")
    assert errors_after == errors_before + 2


def test_metrics_count_storage_errors(degraded_client):
    degraded_client.get("/api/tasks")

    text = degraded_client.get("/metrics").text
    assert _sample(text, "http_errors_total") == 1


def test_metrics_never_decrease(client):
    seen = []
    for _ in range(5):
        client.post("/api/tasks", json={"title": ""})
        text = client.get("/metrics").text
        seen.append((_sample(text, "http_requests_total"), _sample(text, "http_errors_total")))

    assert seen == sorted(seen)
    assert len({s[0] for s in seen}) == len(seen)


def test_metrics_counters_are_whole_numbers(client):
    client.post("/api/tasks", json={})
    text = client.get("/metrics").text

    for name in ("http_requests_total", "http_errors_total"):
        value = _sample(text, name)
        assert value.is_integer()
        assert value >= 1
