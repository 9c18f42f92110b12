from .errors import ParsingError, ParserGeneratorError
from .lexer import EOF_NAME
from .nodes import ADD, SUB, MUL, DIV, Number, BinaryOp

# 令牌名称到语法树运算符的映射
BINARY_OPERATORS = {
    "PLUS": ADD,
    "MINUS": SUB,
    "STAR": MUL,
    "SLASH": DIV,
}


class BindingPower:
    """运算符的左/右绑定力（整数）以及结合性"""

    _attrs_ = ["lbp", "rbp", "assoc"]

    def __init__(self, lbp, rbp, assoc):
        self.lbp = lbp
        self.rbp = rbp
        self.assoc = assoc

    def __repr__(self):
        return f"BindingPower({self.lbp}, {self.rbp}, {self.assoc!r})"

    def __eq__(self, other):
        if not isinstance(other, BindingPower):
            return NotImplemented
        return (self.lbp, self.rbp, self.assoc) == (other.lbp, other.rbp, other.assoc)


class PrattParser:
    """
    优先级爬升（Pratt）解析器。
    :param binding_powers: 令牌名称到 `BindingPower` 的映射，由 ParserGenerator 生成。
    :param error_handler: 错误处理函数，接收出错的令牌，必须抛出异常。
    """

    def __init__(self, binding_powers, error_handler=None):
        self.binding_powers = binding_powers
        self.error_handler = error_handler

    def parse(self, stream):
        """解析整个输入，表达式之后必须是输入结束"""
        lhs = self.parse_expr(stream, 0)
        token = stream.next_token()
        if token.name != EOF_NAME:
            self._error(token, f"Unexpected {token.name} {token.value!r} at position "
                               f"{token.source_pos.idx}, expected end of input")
        return lhs

    def parse_expr(self, stream, min_bp=0):
        token = stream.next_token()
        if token.name != "NUMBER":
            found = "end of input" if token.name == EOF_NAME else f"{token.name} {token.value!r}"
            self._error(token, f"Expected NUMBER at position {token.source_pos.idx}, found {found}")
        lhs = Number(token.getint())

        # 上一次合并所用的非结合运算符的等级
        non_assoc_lbp = None
        while True:
            token = stream.peek()
            if token.name not in BINARY_OPERATORS:
                return lhs
            bp = self._binding_power(token)
            if bp.lbp < min_bp:
                return lhs
            if bp.lbp == non_assoc_lbp:
                self._error(token, f"Operator {token.value!r} at position {token.source_pos.idx} "
                                   f"is non-associative")
            stream.next_token()
            rhs = self.parse_expr(stream, bp.rbp)
            lhs = BinaryOp(BINARY_OPERATORS[token.name], lhs, rhs, token.source_pos)
            non_assoc_lbp = bp.lbp if bp.assoc == "non_assoc" else None

    def _binding_power(self, token):
        try:
            return self.binding_powers[token.name]
        except KeyError:
            raise ParserGeneratorError(f"No binding power defined for {token.name!r}")

    def _error(self, token, message):
        if self.error_handler is not None:
            self.error_handler(token)
            raise AssertionError("For now, error_handler must raise.")
        raise ParsingError(message, token.source_pos, token)
