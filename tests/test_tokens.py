"""Test operator and delimiter tokens, including two-character lookahead."""

import pytest

from monkeylex.tokens import TokenType

from .conftest import assert_literals, assert_types

SINGLE = [
    ("=", TokenType.ASSIGN),
    ("+", TokenType.PLUS),
    ("-", TokenType.MINUS),
    ("!", TokenType.BANG),
    ("*", TokenType.ASTERISK),
    ("/", TokenType.SLASH),
    ("<", TokenType.LT),
    (">", TokenType.GT),
    (",", TokenType.COMMA),
    (";", TokenType.SEMICOLON),
    ("(", TokenType.LPAREN),
    (")", TokenType.RPAREN),
    ("{", TokenType.LBRACE),
    ("}", TokenType.RBRACE),
]


class TestSingleChar:
    @pytest.mark.parametrize(("source", "expected"), SINGLE, ids=[s for s, _ in SINGLE])
    def test_single_char_token(self, lex, source, expected):
        tokens = lex(source)
        assert_types(tokens, [expected])
        assert tokens[0].literal == source

    def test_all_delimiters_in_a_row(self, lex):
        tokens = lex("=+(){},;")
        assert_types(
            tokens,
            [
                TokenType.ASSIGN,
                TokenType.PLUS,
                TokenType.LPAREN,
                TokenType.RPAREN,
                TokenType.LBRACE,
                TokenType.RBRACE,
                TokenType.COMMA,
                TokenType.SEMICOLON,
            ],
        )

    def test_operators_in_a_row(self, lex):
        tokens = lex("!-/*5;")
        assert_types(
            tokens,
            [
                TokenType.BANG,
                TokenType.MINUS,
                TokenType.SLASH,
                TokenType.ASTERISK,
                TokenType.INTEGER,
                TokenType.SEMICOLON,
            ],
        )


class TestTwoChar:
    def test_equal(self, lex):
        tokens = lex("==")
        assert_types(tokens, [TokenType.EQ])
        assert tokens[0].literal == "=="

    def test_not_equal(self, lex):
        tokens = lex("!=")
        assert_types(tokens, [TokenType.NOT_EQ])
        assert tokens[0].literal == "!="

    def test_bang_alone(self, lex):
        tokens = lex("!")
        assert_types(tokens, [TokenType.BANG])
        assert tokens[0].literal == "!"

    def test_assign_at_end_of_input(self, lex):
        tokens = lex("x =")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.ASSIGN])

    def test_triple_equals(self, lex):
        tokens = lex("===")
        assert_types(tokens, [TokenType.EQ, TokenType.ASSIGN])
        assert_literals(tokens, ["==", "="])

    def test_bang_bang_equals(self, lex):
        tokens = lex("!!=")
        assert_types(tokens, [TokenType.BANG, TokenType.NOT_EQ])

    def test_separated_equals_are_two_assigns(self, lex):
        tokens = lex("= =")
        assert_types(tokens, [TokenType.ASSIGN, TokenType.ASSIGN])

    def test_less_equal_is_not_fused(self, lex):
        tokens = lex("<=")
        assert_types(tokens, [TokenType.LT, TokenType.ASSIGN])

    def test_comparisons(self, lex):
        tokens = lex("10 == 10; 10 != 9;")
        assert_types(
            tokens,
            [
                TokenType.INTEGER,
                TokenType.EQ,
                TokenType.INTEGER,
                TokenType.SEMICOLON,
                TokenType.INTEGER,
                TokenType.NOT_EQ,
                TokenType.INTEGER,
                TokenType.SEMICOLON,
            ],
        )
        assert_literals(tokens, ["10", "==", "10", ";", "10", "!=", "9", ";"])


class TestIntegers:
    def test_single_digit(self, lex):
        tokens = lex("5")
        assert_types(tokens, [TokenType.INTEGER])
        assert tokens[0].literal == "5"

    def test_addition(self, lex):
        tokens = lex("5 + 10")
        assert_types(tokens, [TokenType.INTEGER, TokenType.PLUS, TokenType.INTEGER])
        assert_literals(tokens, ["5", "+", "10"])

    def test_leading_zeros_kept(self, lex):
        tokens = lex("007")
        assert_literals(tokens, ["007"])

    def test_minus_is_separate(self, lex):
        tokens = lex("-5")
        assert_types(tokens, [TokenType.MINUS, TokenType.INTEGER])
        assert_literals(tokens, ["-", "5"])

    def test_no_decimal_point(self, lex):
        tokens = lex("3.14")
        assert_types(tokens, [TokenType.INTEGER, TokenType.ILLEGAL, TokenType.INTEGER])
        assert_literals(tokens, ["3", ".", "14"])

    def test_digits_then_letters_split(self, lex):
        tokens = lex("5five")
        assert_types(tokens, [TokenType.INTEGER, TokenType.IDENTIFIER])
        assert_literals(tokens, ["5", "five"])
