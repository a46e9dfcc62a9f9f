"""Unit tests for required argument validation."""

import logging
from datetime import datetime

import pytest

from src.utils.exceptions import DateUtilError, MissingArgumentError
from src.utils.validators import is_present, merge_options, validate_required_arguments


class TestIsPresent:
    """Tests for argument presence rules."""

    def test_zero_is_present(self) -> None:
        """Test zero counts as supplied."""
        assert is_present(0)
        assert is_present(0.0)

    def test_missing_values(self) -> None:
        """Test None, empty string, False and NaN are missing."""
        assert not is_present(None)
        assert not is_present("")
        assert not is_present(False)
        assert not is_present(float("nan"))

    def test_other_values_present(self) -> None:
        """Test ordinary values are present."""
        assert is_present(True)
        assert is_present(15)
        assert is_present("x")
        assert is_present([])
        assert is_present(datetime(2020, 1, 1))


class TestMergeOptions:
    """Tests for option merging."""

    def test_defaults_kept(self) -> None:
        """Test keys the caller leaves out keep their default."""
        params = merge_options({"a": "", "b": ""}, {"a": 1})
        assert params == {"a": 1, "b": ""}

    def test_keywords_win(self) -> None:
        """Test keyword options override the mapping."""
        params = merge_options({"a": ""}, {"a": 1}, a=2)
        assert params == {"a": 2}

    def test_no_options(self) -> None:
        """Test merging with no options returns a copy of the defaults."""
        defaults = {"a": ""}
        params = merge_options(defaults)
        assert params == defaults
        assert params is not defaults


class TestValidateRequiredArguments:
    """Tests for validate_required_arguments."""

    def test_all_present(self) -> None:
        """Test no error when everything is supplied."""
        validate_required_arguments({"minutes": 0, "days": 3}, ["minutes", "days"])

    def test_lists_every_missing_key(self) -> None:
        """Test the message names every missing key in order."""
        with pytest.raises(MissingArgumentError) as exc_info:
            validate_required_arguments(
                {"i_date": "", "end_hour": None, "end_mins": 0},
                ["i_date", "end_hour", "end_mins"],
            )

        error = exc_info.value
        assert str(error) == "A required argument is missing: i_date, end_hour."
        assert error.missing == ("i_date", "end_hour")

    def test_absent_key_is_missing(self) -> None:
        """Test a key not in params at all is missing."""
        with pytest.raises(MissingArgumentError, match="minutes"):
            validate_required_arguments({}, ["minutes"])

    def test_error_metadata(self) -> None:
        """Test the error code and notification hint."""
        with pytest.raises(DateUtilError) as exc_info:
            validate_required_arguments({}, ["days"])

        assert exc_info.value.name == "MISSING_REQD_ARGUMENT"
        assert exc_info.value.notify_off is True

    def test_logs_missing_keys(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test missing keys are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="workdate"):
            with pytest.raises(MissingArgumentError):
                validate_required_arguments({}, ["start_date", "end_date"])

        assert "start_date, end_date" in caplog.text
