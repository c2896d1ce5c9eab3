"""
Tests for the template lexer.
"""

import pytest

from tagc.config import LexerConfig
from tagc.template.tokens import LexerError, TokenType
from tests.infrastructure import tokenize


def types_of(tokens):
    return [t.type for t in tokens]


class TestTemplateLexer:

    def test_empty_string(self):
        """Empty template produces only EOF"""
        tokens = tokenize("")
        assert types_of(tokens) == [TokenType.EOF]

    def test_plain_text(self):
        """Text without tags is a single DATA token"""
        tokens = tokenize("Hello, world!\nSecond line")
        assert types_of(tokens) == [TokenType.DATA, TokenType.EOF]
        assert tokens[0].value == "Hello, world!\nSecond line"

    def test_lorem_tag(self):
        """Tag content is split into names, integers and delimiters"""
        tokens = tokenize("{% lorem 3 p random %}")

        assert types_of(tokens) == [
            TokenType.BLOCK_BEGIN,
            TokenType.NAME,
            TokenType.INTEGER,
            TokenType.NAME,
            TokenType.NAME,
            TokenType.BLOCK_END,
            TokenType.EOF,
        ]
        assert [t.value for t in tokens[:-1]] == ["{%", "lorem", "3", "p", "random", "%}"]

    def test_text_around_tag(self):
        tokens = tokenize("before {% comment %} after")
        assert types_of(tokens) == [
            TokenType.DATA,
            TokenType.BLOCK_BEGIN,
            TokenType.NAME,
            TokenType.BLOCK_END,
            TokenType.DATA,
            TokenType.EOF,
        ]
        assert tokens[0].value == "before "
        assert tokens[4].value == " after"

    def test_positions(self):
        """Tokens carry 1-based line and column"""
        tokens = tokenize("ab\n{% lorem 2 %}")

        block_begin, name, count = tokens[1], tokens[2], tokens[3]
        assert (block_begin.line, block_begin.column) == (2, 1)
        assert (name.line, name.column) == (2, 4)
        assert (count.line, count.column) == (2, 10)
        assert block_begin.position == 3

    def test_tag_spanning_lines(self):
        tokens = tokenize("{%\n  lorem\n%}")
        assert types_of(tokens) == [TokenType.BLOCK_BEGIN, TokenType.NAME, TokenType.BLOCK_END, TokenType.EOF]
        assert (tokens[1].line, tokens[1].column) == (2, 3)
        assert (tokens[2].line, tokens[2].column) == (3, 1)

    def test_strings_floats_symbols(self):
        tokens = tokenize("{% x \"a b\" 1.5 'c' == ( %}")
        assert types_of(tokens)[1:-2] == [
            TokenType.NAME,
            TokenType.STRING,
            TokenType.FLOAT,
            TokenType.STRING,
            TokenType.SYMBOL,
            TokenType.SYMBOL,
        ]
        assert tokens[2].value == '"a b"'
        assert tokens[3].value == "1.5"
        assert tokens[5].value == "=="

    def test_short_comment(self):
        """Short comment body is kept as a single DATA token"""
        tokens = tokenize("a{# {% lorem %} #}b")
        assert types_of(tokens) == [
            TokenType.DATA,
            TokenType.COMMENT_BEGIN,
            TokenType.DATA,
            TokenType.COMMENT_END,
            TokenType.DATA,
            TokenType.EOF,
        ]
        assert tokens[2].value == " {% lorem %} "

    def test_variable_braces_are_text(self):
        """{{ ... }} is not handled by this lexer"""
        tokens = tokenize("{{ name }}")
        assert types_of(tokens) == [TokenType.DATA, TokenType.EOF]

    def test_unclosed_tag(self):
        with pytest.raises(LexerError) as exc_info:
            tokenize("text\n{% lorem 3")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 1

    def test_unclosed_comment(self):
        with pytest.raises(LexerError, match="Unclosed comment"):
            tokenize("{# never closed")

    def test_unexpected_character(self):
        with pytest.raises(LexerError) as exc_info:
            tokenize("{% lorem @ %}")
        assert exc_info.value.column == 10
        assert "'@'" in str(exc_info.value)

    def test_custom_delimiters(self):
        config = LexerConfig(block_start="<%", block_end="%>", comment_start="<#", comment_end="#>")
        tokens = tokenize("a <% lorem 2 w %> {% b %} <# c #>", config)

        assert types_of(tokens) == [
            TokenType.DATA,
            TokenType.BLOCK_BEGIN,
            TokenType.NAME,
            TokenType.INTEGER,
            TokenType.NAME,
            TokenType.BLOCK_END,
            TokenType.DATA,
            TokenType.COMMENT_BEGIN,
            TokenType.DATA,
            TokenType.COMMENT_END,
            TokenType.EOF,
        ]
        assert tokens[6].value == " {% b %} "
