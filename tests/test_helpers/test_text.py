"""Tests for chat text helpers (text.py)."""

from buildnotify.helpers.text import escape, expand_variables


# escape

class TestEscape:
    def test_escapes_each_character_once(self):
        assert escape("a < b & c") == "a &lt; b &amp; c"

    def test_escapes_angle_brackets(self):
        assert escape("<tag>") == "&lt;tag&gt;"

    def test_ampersand_escaped_before_brackets(self):
        # The entities produced for < and > must not be escaped again
        assert escape("<&>") == "&lt;&amp;&gt;"

    def test_not_idempotent(self):
        assert escape(escape("<")) == "&amp;lt;"

    def test_plain_text_unchanged(self):
        assert escape("Fix parser") == "Fix parser"


# expand_variables

class TestExpandVariables:
    def test_dollar_name(self):
        assert expand_variables("on $BRANCH", {"BRANCH": "main"}) == "on main"

    def test_braced_name(self):
        assert expand_variables("${JOB_NAME}-x", {"JOB_NAME": "api"}) == "api-x"

    def test_unknown_variable_left_as_written(self):
        assert expand_variables("$MISSING and ${ALSO}", {}) == "$MISSING and ${ALSO}"

    def test_no_variables(self):
        assert expand_variables("plain text", {"A": "b"}) == "plain text"

    def test_multiple_references(self):
        env = {"A": "1", "B": "2"}
        assert expand_variables("$A/${B}/$A", env) == "1/2/1"
