import pytest

from import_rewriter.utils.go_literals import unquote


class TestUnquote:

    def test_plain_interpreted(self):
        assert unquote('"fmt"') == "fmt"

    def test_raw(self):
        assert unquote('`old/pkg`') == "old/pkg"

    def test_raw_drops_carriage_returns(self):
        assert unquote('`a\r/b`') == "a/b"

    @pytest.mark.parametrize("literal, expected", [
        (r'"a\x2fb"', "a/b"),
        (r'"a\057b"', "a/b"),
        (r'"é"', "é"),
        (r'"\U0001F600"', "\U0001F600"),
        (r'"tab\there"', "tab\there"),
        (r'"q\"q"', 'q"q'),
        (r'"back\\slash"', "back\\slash"),
    ])
    def test_escapes(self, literal, expected):
        assert unquote(literal) == expected

    def test_utf8_passthrough(self):
        assert unquote('"日本/語"') == "日本/語"

    @pytest.mark.parametrize("literal", [
        '"',
        '"abc',
        "'abc'",
        '"a"b"',
        r'"\q"',
        r'"\x4"',
        r'"\xzz"',
        r'"\400"',
        r'"\ud800"',
        '"a\nb"',
        '`a`b`',
        '"trailing\\"',
    ])
    def test_invalid_literals(self, literal):
        with pytest.raises(ValueError):
            unquote(literal)
