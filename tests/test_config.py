from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from storefront.core import telemetry
from storefront.core.config import Settings


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://market.example/api")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "7.5")
    monkeypatch.setenv("API_TOKEN", "secret")

    s = Settings()

    assert s.api_base_url == "https://market.example/api"
    assert s.http_timeout_seconds == 7.5
    assert s.api_token.get_secret_value() == "secret"
    assert "secret" not in repr(s)


def test_telemetry_disabled_by_default(monkeypatch):
    monkeypatch.setattr(telemetry.settings, "telemetry_enabled", False)
    assert telemetry.setup_telemetry() is False


def test_tracer_provider_exports_spans():
    exporter = InMemorySpanExporter()
    provider = telemetry.build_tracer_provider(exporter)

    with provider.get_tracer("test").start_as_current_span("probe"):
        pass
    provider.force_flush()

    (span,) = exporter.get_finished_spans()
    assert span.name == "probe"
    assert span.resource.attributes["service.name"] == "storefront-edit"
