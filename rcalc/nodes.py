from .box import BaseBox

ADD = "+"
SUB = "-"
MUL = "*"
DIV = "/"

OPERATORS = (ADD, SUB, MUL, DIV)


class Node(BaseBox):
    """
    语法树节点基类。节点在构造后不可修改，求值过程只读取节点。
    比较、哈希和 to_str 都用显式栈遍历，长表达式不会触发递归深度限制。
    """

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        # 位置信息不参与比较
        pairs = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if type(a) is not type(b):
                return False
            if isinstance(a, Number):
                if a.value != b.value:
                    return False
            elif a.operator != b.operator:
                return False
            else:
                pairs.append((a.right, b.right))
                pairs.append((a.left, b.left))
        return True

    def __hash__(self):
        return hash((Node, self.to_str()))

    def to_str(self):
        """完全加括号的表达式，例如 (3+(4*2))"""
        parts = []
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, Number):
                parts.append(str(item.value))
            else:
                stack.extend([")", item.right, item.operator, item.left, "("])
        return "".join(parts)


class Number(Node):
    _attrs_ = ["value"]

    def __init__(self, value):
        object.__setattr__(self, "value", value)

    def __repr__(self):
        return f"Number({self.value!r})"


class BinaryOp(Node):
    """
    二元运算节点。
    :param operator: 运算符，ADD / SUB / MUL / DIV 之一。
    :param left: 左子树。
    :param right: 右子树。
    :param source_pos: 运算符在源码中的位置（可选，用于错误报告）。
    """
    _attrs_ = ["operator", "left", "right", "source_pos"]

    def __init__(self, operator, left, right, source_pos=None):
        if left is None or right is None:
            raise ValueError("BinaryOp requires both operands")
        object.__setattr__(self, "operator", operator)
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)
        object.__setattr__(self, "source_pos", source_pos)

    def __repr__(self):
        return f"BinaryOp({self.operator!r}, {self.left!r}, {self.right!r})"
