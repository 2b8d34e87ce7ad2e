import pytest

from core.metrics import track_performance
from core.prometheus_metrics import REGISTRY
from services.exceptions import VehiclesNotFoundError


def _count(method, status):
    value = REGISTRY.get_sample_value(
        "vehicle_service_requests_total",
        {"status": status, "service": "MetricsProbe", "method": method},
    )
    return value or 0.0


class MetricsProbe:
    @track_performance()
    def ok(self):
        return "done"

    @track_performance()
    def empty(self):
        raise VehiclesNotFoundError("nothing here")

    @track_performance()
    def broken(self):
        raise RuntimeError("boom")


def test_success_is_counted():
    before = _count("ok", "success")

    assert MetricsProbe().ok() == "done"

    assert _count("ok", "success") == before + 1


def test_domain_errors_are_counted_as_rejected():
    before = _count("empty", "rejected")

    with pytest.raises(VehiclesNotFoundError):
        MetricsProbe().empty()

    assert _count("empty", "rejected") == before + 1


def test_unexpected_errors_are_counted_and_reraised():
    before = _count("broken", "error")

    with pytest.raises(RuntimeError):
        MetricsProbe().broken()

    assert _count("broken", "error") == before + 1


def test_wrapped_function_is_preserved():
    assert MetricsProbe.ok.__wrapped__(MetricsProbe()) == "done"


def test_prometheus_endpoint(client, make_payload):
    client.post("/vehicles", json=make_payload())

    resp = client.get("/metrics/prometheus")

    assert resp.status_code == 200
    assert "vehicle_service_requests_total" in resp.text
    assert "vehicle_catalog_size 1.0" in resp.text
