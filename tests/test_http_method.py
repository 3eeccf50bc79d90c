"""Tests for the HTTP method enumeration."""

import pytest

from apiflow.http import HTTPMethod


class TestHTTPMethod:
    """Test method tokens and parsing."""

    def test_every_method_has_uppercase_token(self):
        expected = ["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]
        assert [m.token for m in HTTPMethod] == expected

    def test_str_is_token(self):
        assert str(HTTPMethod.DELETE) == "DELETE"
        assert f"{HTTPMethod.PATCH}" == "PATCH"

    def test_parse_is_case_insensitive(self):
        assert HTTPMethod.parse("post") is HTTPMethod.POST
        assert HTTPMethod.parse("  Options ") is HTTPMethod.OPTIONS

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown HTTP method"):
            HTTPMethod.parse("TRACE")
