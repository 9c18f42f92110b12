import warnings

from .parser import BINARY_OPERATORS, BindingPower, PrattParser
from .errors import ParserGeneratorError, ParserGeneratorWarning

ASSOCIATIVITIES = ["left", "right", "non_assoc"]

DEFAULT_PRECEDENCE = (
    ("left", ("PLUS", "MINUS")),
    ("left", ("STAR", "SLASH")),
)


class ParserGenerator:
    """
    解析器生成器（ParserGenerator）根据优先级表生成优先级爬升解析器。
    :param precedence: 元组列表，按优先级从低到高排列，每个元组由结合性（left、right 或 non_assoc）
                       和具有相同结合性及优先级级别的运算符令牌名称列表组成。
    """

    def __init__(self, precedence=DEFAULT_PRECEDENCE):
        self.precedence = list(precedence)
        self.error_handler = None

    def error(self, func):
        """
        定义解析错误处理函数。
        :param func: 解析错误处理函数，接收出错的令牌，必须抛出异常。
        :return: 解析错误处理函数。
        """
        self.error_handler = func
        return func

    def binding_powers(self):
        """
        第 n 级（从 1 开始）的左绑定力为 2n；
        左结合与非结合的右绑定力为 2n + 1，右结合的右绑定力等于左绑定力。
        """
        table = {}
        for idx, (assoc, terms) in enumerate(self.precedence, 1):
            if assoc not in ASSOCIATIVITIES:
                raise ParserGeneratorError(f"Precedence must be one of left, right, non_assoc; not {assoc!r}")
            lbp = idx * 2
            rbp = lbp if assoc == "right" else lbp + 1
            for term in terms:
                if term in table:
                    raise ParserGeneratorError(f"Precedence already specified for {term!r}")
                if term not in BINARY_OPERATORS:
                    raise ParserGeneratorError(f"Token {term!r} is not a binary operator")
                table[term] = BindingPower(lbp, rbp, assoc)
        return table

    def build(self):
        table = self.binding_powers()
        for term in BINARY_OPERATORS:
            if term not in table:
                warnings.warn(f"Token {term!r} has no binding power", ParserGeneratorWarning, stacklevel=2)
        return PrattParser(table, self.error_handler)
