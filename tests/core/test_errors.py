"""Error Hierarchy: codes, HTTP statuses and the REST envelope."""

from b2b_gate.core.errors import (
    B2BGateError, NotFoundError, ConfigurationError,
    CollaboratorUnavailableError, ErrorCategory,
)


def test_not_found_error_shape():
    err = NotFoundError("Product", 42)
    assert isinstance(err, B2BGateError)
    assert err.http_status == 404
    assert err.message == "Product '42' not found"
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND


def test_configuration_error_records_key():
    err = ConfigurationError("add_to_cart.value", "bad")
    assert err.http_status == 422
    assert err.context.config_key == "add_to_cart.value"


def test_collaborator_unavailable_is_critical():
    err = CollaboratorUnavailableError("Catalog snapshot", "missing file")
    assert err.http_status == 503
    assert err.severity.value == "critical"


def test_to_response_envelope():
    body = ConfigurationError("generalsettings.active", "bad").to_response()
    error = body["error"]
    assert error["code"] == "CONFIGURATION_ERROR"
    assert error["category"] == "configuration"
    assert error["context"]["config_key"] == "generalsettings.active"
    assert "timestamp" in error
