"""
Tests for the exception hierarchy.
"""

from pathlib import Path

import pytest

from envcascade.exceptions import (
    EnvcascadeError,
    EnvFileError,
    EnvFileOpenError,
    EnvFileReadError,
    PublishError,
)


class TestHierarchy:
    """Verify all exceptions inherit from EnvcascadeError."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            EnvFileError,
            EnvFileOpenError,
            EnvFileReadError,
            PublishError,
        ],
    )
    def test_inherits_from_envcascade_error(self, exc_class):
        assert issubclass(exc_class, EnvcascadeError)

    def test_file_errors_share_base(self):
        assert issubclass(EnvFileOpenError, EnvFileError)
        assert issubclass(EnvFileReadError, EnvFileError)

    def test_publish_error_is_not_a_file_error(self):
        assert not issubclass(PublishError, EnvFileError)


class TestAttributes:
    """Verify exception attributes and messages."""

    def test_base_details_default(self):
        err = EnvcascadeError("boom")
        assert err.message == "boom"
        assert err.details == {}
        assert str(err) == "boom"

    def test_open_error(self):
        cause = PermissionError("denied")
        err = EnvFileOpenError("/tmp/.env", cause)
        assert err.path == Path("/tmp/.env")
        assert err.details == {"path": "/tmp/.env"}
        assert err.__cause__ is cause
        assert "Unable to open file '/tmp/.env'" in str(err)

    def test_read_error(self):
        cause = OSError("I/O error")
        err = EnvFileReadError(Path("/tmp/.env"), cause)
        assert err.__cause__ is cause
        assert "Failed to read file" in str(err)

    def test_publish_error_with_reason_string(self):
        err = PublishError("KEY", "empty variable name")
        assert err.key == "KEY"
        assert err.details == {"key": "KEY"}
        assert err.__cause__ is None
        assert "Unable to set environment variable 'KEY'" in str(err)

    def test_publish_error_with_exception(self):
        cause = ValueError("embedded null byte")
        err = PublishError("KEY", cause)
        assert err.__cause__ is cause
        assert "embedded null byte" in str(err)

    def test_catch_all_with_base(self):
        with pytest.raises(EnvcascadeError):
            raise EnvFileOpenError("x", OSError("nope"))
