import pytest

from marvin_engine.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_loggers_are_cached_per_name() -> None:
    telemetry.configure()

    first = telemetry.get_logger("marvin_engine.tests")

    assert telemetry.get_logger("marvin_engine.tests") is first


def test_span_reraises_handler_errors() -> None:
    telemetry.configure()

    with pytest.raises(RuntimeError):
        with telemetry.span("tests::boom", component="tests") as handle:
            handle.add_metadata("attempt", 1)
            raise RuntimeError("boom")
