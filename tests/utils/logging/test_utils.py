# ABOUTME: Tests for the operation logging decorators
# ABOUTME: Validates success, failure and expected-outcome log levels of with_operation_context

import pytest
import structlog
from structlog.testing import capture_logs

from height_inspector.extraction.base import NoMeasurementsError
from height_inspector.utils.logging.utils import with_operation_context


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@with_operation_context("measure", expected=(NoMeasurementsError,))
def measure(values):
    if values is None:
        raise RuntimeError("broken table")
    if not values:
        raise NoMeasurementsError()
    return values


class TestWithOperationContext:
    def test_success_logs_result_count(self):
        with capture_logs() as logs:
            assert measure([1.85, 1.8542]) == [1.85, 1.8542]

        completed = [entry for entry in logs if entry["event"] == "Completed measure"]
        assert completed[0]["log_level"] == "info"
        assert completed[0]["result_count"] == 2
        assert completed[0]["operation"] == "measure"

    def test_expected_failure_is_a_warning(self):
        with capture_logs() as logs, pytest.raises(NoMeasurementsError):
            measure([])

        failed = [entry for entry in logs if entry["event"] == "Failed measure"]
        assert failed[0]["log_level"] == "warning"
        assert failed[0]["error_type"] == "NoMeasurementsError"

    def test_unexpected_failure_is_an_error(self):
        with capture_logs() as logs, pytest.raises(RuntimeError):
            measure(None)

        failed = [entry for entry in logs if entry["event"] == "Failed measure"]
        assert failed[0]["log_level"] == "error"
        assert failed[0]["success"] is False
