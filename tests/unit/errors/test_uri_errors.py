# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for connection string error classes.

All tests validate:
- Error class instantiation
- Inheritance chain
- Error chaining (raise ... from e)
- Structured context fields via ModelUriErrorContext
- Error code mapping
"""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from mongo_uri.enums import EnumUriErrorCode
from mongo_uri.errors import (
    InvalidHostError,
    InvalidOptionError,
    InvalidPortError,
    InvalidSchemeError,
    InvalidUserinfoError,
    ModelUriErrorContext,
    MongoUriError,
)


class TestModelUriErrorContextWithCorrelation:
    """Tests for ModelUriErrorContext.with_correlation() factory method."""

    def test_with_correlation_generates_uuid_when_none(self) -> None:
        context = ModelUriErrorContext.with_correlation()
        assert isinstance(context.correlation_id, UUID)
        assert context.correlation_id.version == 4

    def test_with_correlation_uses_provided_uuid(self) -> None:
        provided_id = uuid4()
        context = ModelUriErrorContext.with_correlation(correlation_id=provided_id)
        assert context.correlation_id == provided_id

    def test_with_correlation_with_other_fields(self) -> None:
        context = ModelUriErrorContext.with_correlation(
            operation="parse_uri",
            stage="hosts",
            position=10,
        )
        assert context.correlation_id is not None
        assert context.operation == "parse_uri"
        assert context.stage == "hosts"
        assert context.position == 10


class TestModelUriErrorContext:
    """Tests for ModelUriErrorContext configuration model."""

    def test_basic_instantiation(self) -> None:
        context = ModelUriErrorContext()
        assert context.operation is None
        assert context.stage is None
        assert context.position is None
        assert context.correlation_id is None

    def test_immutability(self) -> None:
        context = ModelUriErrorContext(stage="scheme")
        with pytest.raises(ValidationError):
            context.stage = "hosts"  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ModelUriErrorContext(uri="mongodb://u:p@h")  # type: ignore[call-arg]

    def test_negative_position_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelUriErrorContext(position=-1)


class TestMongoUriError:
    """Tests for MongoUriError base class."""

    def test_basic_instantiation(self) -> None:
        error = MongoUriError("Test error message")
        assert "Test error message" in str(error)
        assert isinstance(error, ValueError)
        assert error.error_code == EnumUriErrorCode.INVALID_INPUT
        assert error.correlation_id is None
        assert error.context == {}

    def test_with_context_model(self) -> None:
        correlation_id = uuid4()
        context = ModelUriErrorContext(
            operation="parse_uri",
            stage="options",
            position=12,
            correlation_id=correlation_id,
        )
        error = MongoUriError("Failed", context=context, option_index=2)
        assert error.correlation_id == correlation_id
        assert error.context == {
            "operation": "parse_uri",
            "stage": "options",
            "position": 12,
            "option_index": 2,
        }

    def test_explicit_error_code(self) -> None:
        error = MongoUriError("x", error_code=EnumUriErrorCode.INVALID_HOST)
        assert error.error_code == EnumUriErrorCode.INVALID_HOST
        assert str(error) == "[invalid_host] x"

    def test_error_chaining(self) -> None:
        original = ValueError("inner")
        try:
            raise MongoUriError("outer") from original
        except MongoUriError as e:
            assert e.__cause__ is original


class TestErrorHierarchy:
    """Tests for subclass codes and inheritance."""

    @pytest.mark.parametrize(
        ("error_cls", "code"),
        [
            (InvalidSchemeError, EnumUriErrorCode.INVALID_SCHEME),
            (InvalidUserinfoError, EnumUriErrorCode.INVALID_USERINFO),
            (InvalidHostError, EnumUriErrorCode.INVALID_HOST),
            (InvalidPortError, EnumUriErrorCode.INVALID_PORT),
            (InvalidOptionError, EnumUriErrorCode.INVALID_OPTION),
        ],
    )
    def test_default_codes(self, error_cls: type[MongoUriError], code: EnumUriErrorCode) -> None:
        error = error_cls("message")
        assert error.error_code == code
        assert isinstance(error, MongoUriError)
        assert isinstance(error, ValueError)

    def test_port_error_is_host_error(self) -> None:
        with pytest.raises(InvalidHostError):
            raise InvalidPortError("bad port")
