"""Tests for the application exception hierarchy."""

import pytest

from src.exceptions import AppError, ConfigurationError, DataValidationError, ExportError


@pytest.mark.parametrize(
    "cls, code",
    [
        (ConfigurationError, "CONFIGURATION_ERROR"),
        (DataValidationError, "DATA_VALIDATION_ERROR"),
        (ExportError, "EXPORT_ERROR"),
    ],
)
def test_subclasses_carry_stable_codes(cls, code):
    err = cls("went wrong", context={"path": "about.html"})
    assert isinstance(err, AppError)
    assert err.code == code
    assert str(err) == f"{code}: went wrong"
    assert err.to_dict() == {
        "error_code": code,
        "message": "went wrong",
        "context": {"path": "about.html"},
        "is_transient": False,
    }


def test_context_is_copied():
    context = {"k": "v"}
    err = AppError("CODE", "m", context=context, transient=True)
    context["k"] = "changed"
    assert err.context == {"k": "v"}
    assert err.transient is True
