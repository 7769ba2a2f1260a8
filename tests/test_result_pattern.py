"""Tests for the Result pattern implementation.

This module tests the Result wrapper and the domain errors used to report
query failures as values.
"""

import pytest

from brickset.domain.result import (
    DomainError,
    EmptyCollectionError,
    EmptyNameError,
    Failure,
    MissingThemeError,
    NotFoundError,
    Success,
    ValidationError,
    partition,
    try_catch,
)

from conftest import make_service


class TestSuccess:
    """Test the Success result type."""

    def test_success_creation(self):
        result = Success(42)
        assert result.is_success() is True
        assert result.is_failure() is False
        assert result.value() == 42

    def test_success_repr(self):
        assert repr(Success("test")) == "Success('test')"

    def test_success_error_raises(self):
        with pytest.raises(ValueError, match="Cannot get error from Success result"):
            Success(42).error()


class TestFailure:
    """Test the Failure result type."""

    def test_failure_creation(self):
        error = EmptyCollectionError("nothing")
        result = Failure(error)
        assert result.is_failure() is True
        assert result.error() is error

    def test_failure_value_raises(self):
        with pytest.raises(ValueError, match="Cannot get value from Failure result"):
            Failure(ValidationError("bad")).value()

    def test_failure_repr(self):
        assert repr(Failure(ValidationError("bad"))) == "Failure(ValidationError('bad'))"


class TestHelpers:
    """Test the helper functions."""

    def test_try_catch_wraps_query_errors(self):
        result = try_catch(make_service([]).max_by_pieces)
        assert result.is_failure()
        assert isinstance(result.error(), EmptyCollectionError)

    def test_try_catch_success(self):
        result = try_catch(make_service([]).min_pieces)
        assert result.is_success()
        assert result.value() > 0

    def test_try_catch_only_catches_given_type(self):
        result = try_catch(lambda: make_service([]).max_by_pieces(), EmptyCollectionError)
        assert isinstance(result.error(), EmptyCollectionError)

        with pytest.raises(ZeroDivisionError):
            try_catch(lambda: 1 / 0, EmptyCollectionError)

    def test_partition(self):
        error = ValidationError("bad")
        values, errors = partition([Success(1), Failure(error), Success(2)])
        assert values == [1, 2]
        assert errors == [error]

    def test_partition_empty(self):
        assert partition([]) == ([], [])


class TestDomainErrors:
    """Test the query failure taxonomy."""

    def test_all_are_domain_errors(self):
        for error in (
            MissingThemeError("1"),
            EmptyNameError("1"),
            EmptyCollectionError("none"),
            ValidationError("bad"),
            NotFoundError("no handler"),
        ):
            assert isinstance(error, DomainError)

    def test_missing_theme_message(self):
        assert str(MissingThemeError("8534-1")) == "Set 8534-1 has no theme"
        assert str(MissingThemeError(None)) == "Set <unnumbered> has no theme"

    def test_empty_name_keeps_number(self):
        error = EmptyNameError("42-1")
        assert error.number == "42-1"
        assert "empty name" in str(error)
