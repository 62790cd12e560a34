"""Tests for _types.py — VariableSpec, resolution results, exceptions."""

import pytest
from pydantic import ValidationError

from envtiers._types import (
    ConfigError,
    FailureReason,
    MissingValueError,
    Resolution,
    ResolutionFailure,
    ValidationFailedError,
    VariableSpec,
)


class TestVariableSpec:
    def test_defaults(self):
        spec = VariableSpec(key="CLIENT_ID")
        assert spec.default == ""
        assert spec.validator is None
        assert spec.secret is False

    def test_empty_key_rejected(self):
        with pytest.raises(ValidationError):
            VariableSpec(key="")

    def test_accepts_any_callable_validator(self):
        spec = VariableSpec(key="X", validator=lambda v: len(v) > 0)
        assert spec.validator("a") is True
        assert spec.validator("") is False

    def test_frozen(self):
        spec = VariableSpec(key="X")
        with pytest.raises(ValidationError):
            spec.default = "changed"

    def test_display_redacts_secret(self):
        assert VariableSpec(key="X", secret=True).display("hunter2") == "***"
        assert VariableSpec(key="X").display("hunter2") == "hunter2"

    def test_display_empty_secret_not_masked(self):
        assert VariableSpec(key="X", secret=True).display("") == ""


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(ValidationFailedError, ConfigError)
        assert issubclass(MissingValueError, ConfigError)

    def test_message_includes_key(self):
        err = MissingValueError("ISSUER")
        assert "ISSUER" in str(err)
        assert err.key == "ISSUER"

    def test_validation_error_keeps_value(self):
        err = ValidationFailedError("ISSUER", "http://x")
        assert err.key == "ISSUER"
        assert err.value == "http://x"
        assert "http://x" in str(err)


class TestResolutionFailure:
    def test_validation_message(self):
        failure = ResolutionFailure("ISSUER", FailureReason.VALIDATION_FAILED, "ftp://x")
        assert failure.message == "Validation failed for ISSUER with value 'ftp://x'."

    def test_missing_message(self):
        failure = ResolutionFailure("ISSUER", FailureReason.MISSING)
        assert failure.message == "Could not resolve a ISSUER environment variable."

    def test_secret_value_redacted(self):
        failure = ResolutionFailure(
            "TOKEN", FailureReason.VALIDATION_FAILED, "short", secret=True
        )
        assert "short" not in failure.message
        assert "short" not in str(failure.to_error())

    def test_to_error_types(self):
        assert isinstance(
            ResolutionFailure("A", FailureReason.VALIDATION_FAILED).to_error(),
            ValidationFailedError,
        )
        assert isinstance(ResolutionFailure("A", FailureReason.MISSING).to_error(), MissingValueError)


class TestResolution:
    def test_ok_without_failure(self):
        resolution = Resolution(resolved=["A"])
        assert resolution.ok
        resolution.raise_for_failure()

    def test_raise_for_failure(self):
        resolution = Resolution(failure=ResolutionFailure("A", FailureReason.MISSING))
        assert not resolution.ok
        with pytest.raises(MissingValueError, match="A"):
            resolution.raise_for_failure()


class TestValidatorField:
    def test_callable_object_accepted(self):
        class Always:
            def __call__(self, value):
                return True

        assert VariableSpec(key="X", validator=Always()).validator("") is True

    def test_non_callable_rejected(self):
        with pytest.raises(ValidationError):
            VariableSpec(key="X", validator="not callable")
