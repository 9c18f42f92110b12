from rcalc import default_lexer, ParserGenerator, Interpreter


def demo(code):
    lexer = default_lexer()
    parser = ParserGenerator(
        precedence=[("left", ["PLUS", "MINUS"]), ("left", ["STAR", "SLASH"])]
    ).build()

    ast = parser.parse(lexer.lex(code))
    print(Interpreter().evaluate(ast))


if __name__ == '__main__':
    demo("3+4-5*2*2*3*1+9*3*3+8")
