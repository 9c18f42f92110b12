from pytest import raises

from rcalc import (ParserGenerator, ParsingError, LexingError, ParserGeneratorError,
                   Number, BinaryOp, default_lexer)

from .utils import RecordingLexer


def parse(code, pg=None):
    parser = (pg or ParserGenerator()).build()
    return parser.parse(default_lexer().lex(code))


class TestParser(object):
    def test_single_number(self):
        assert parse("7") == Number(7)

    def test_precedence(self):
        assert parse("3+4*2") == BinaryOp("+", Number(3), BinaryOp("*", Number(4), Number(2)))
        assert parse("2*3+4") == BinaryOp("+", BinaryOp("*", Number(2), Number(3)), Number(4))

    def test_left_associativity(self):
        assert parse("8-3-2").to_str() == "((8-3)-2)"
        assert parse("8/4/2").to_str() == "((8/4)/2)"
        assert parse("1-2+3").to_str() == "((1-2)+3)"

    def test_mixed_chain(self):
        tree = parse("3+4-5*2*2*3*1+9*3*3+8")
        assert tree.to_str() == "((((3+4)-((((5*2)*2)*3)*1))+((9*3)*3))+8)"

    def test_operator_source_pos(self):
        tree = parse("1+2*3")
        assert tree.source_pos.idx == 1
        assert tree.right.source_pos.idx == 3

    def test_parse_is_repeatable(self):
        parser = ParserGenerator().build()
        first = parser.parse(default_lexer().lex("9-8/4"))
        second = parser.parse(default_lexer().lex("9-8/4"))
        assert first == second

    def test_token_requests(self):
        record = []
        parser = ParserGenerator().build()
        parser.parse(RecordingLexer(record, default_lexer().lex("1+2")))
        assert record == [
            "next:NUMBER",
            "peek:PLUS",
            "next:PLUS",
            "next:NUMBER",
            "peek:$end",
            "peek:$end",
            "next:$end",
        ]

    def test_parse_expr_stops_before_trailing_token(self):
        parser = ParserGenerator().build()
        stream = default_lexer().lex("1+23")
        assert parser.parse_expr(stream) == BinaryOp("+", Number(1), Number(2))
        assert stream.next_token().value == "3"


class TestParserErrors(object):
    def test_leading_operator(self):
        with raises(ParsingError) as excinfo:
            parse("+3")
        assert excinfo.value.token.name == "PLUS"
        assert excinfo.value.source_pos.idx == 0

    def test_trailing_operator(self):
        with raises(ParsingError) as excinfo:
            parse("3+")
        assert excinfo.value.token.name == "$end"
        assert excinfo.value.source_pos.idx == 2
        assert "end of input" in str(excinfo.value)

    def test_empty_input(self):
        with raises(ParsingError):
            parse("")

    def test_double_operator(self):
        with raises(ParsingError) as excinfo:
            parse("3+*4")
        assert excinfo.value.token.name == "STAR"
        assert excinfo.value.source_pos.idx == 2

    def test_multi_digit_is_rejected(self):
        with raises(ParsingError) as excinfo:
            parse("12")
        assert excinfo.value.token.value == "2"
        assert excinfo.value.source_pos.idx == 1

    def test_invalid_character(self):
        with raises(LexingError) as excinfo:
            parse("3+a")
        assert excinfo.value.char == "a"
        assert excinfo.value.source_pos.idx == 2

    def test_error_handler(self):
        pg = ParserGenerator()

        @pg.error
        def error_handler(token):
            raise ValueError(f"Ran into a {token.get_type()} where it wasn't expected")

        with raises(ValueError) as excinfo:
            parse("-1", pg)
        assert "MINUS" in str(excinfo.value)

    def test_error_handler_must_raise(self):
        pg = ParserGenerator()

        @pg.error
        def error_handler(token):
            pass

        with raises(AssertionError):
            parse("1-", pg)

    def test_missing_binding_power(self):
        parser = ParserGenerator().build()
        del parser.binding_powers["SLASH"]
        with raises(ParserGeneratorError):
            parser.parse(default_lexer().lex("1/2"))


class TestAssociativity(object):
    def test_right(self):
        pg = ParserGenerator(precedence=[
            ("right", ["PLUS", "MINUS"]),
            ("left", ["STAR", "SLASH"]),
        ])
        assert parse("8-3-2", pg).to_str() == "(8-(3-2))"
        assert parse("1+2*3-4", pg).to_str() == "(1+((2*3)-4))"

    def test_non_assoc(self):
        pg = ParserGenerator(precedence=[
            ("non_assoc", ["PLUS", "MINUS"]),
            ("left", ["STAR", "SLASH"]),
        ])
        assert parse("1-2*3", pg).to_str() == "(1-(2*3))"
        with raises(ParsingError) as excinfo:
            parse("1-2-3", pg)
        assert excinfo.value.source_pos.idx == 3

    def test_inverted_precedence(self):
        pg = ParserGenerator(precedence=[
            ("left", ["STAR", "SLASH"]),
            ("left", ["PLUS", "MINUS"]),
        ])
        assert parse("3+4*2", pg).to_str() == "((3+4)*2)"
