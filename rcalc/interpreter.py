from .errors import EvaluationError, DivisionByZeroError
from .nodes import ADD, SUB, MUL, DIV, Number, BinaryOp


def truncating_div(left, right):
    # 向零取整，与 C 的整数除法一致（Python 的 // 向负无穷取整）
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


class Interpreter:
    """
    求值器：后序遍历语法树（先左后右），折叠为一个整数。
    不修改语法树，同一棵树可以重复求值。
    遍历使用显式栈，树的深度不受解释器递归深度限制。
    """

    def evaluate(self, node):
        stack = [(node, False)]  # (节点, 子节点是否已求值)
        values = []
        while stack:
            node, visited = stack.pop()
            if isinstance(node, Number):
                values.append(node.value)
            elif isinstance(node, BinaryOp):
                if visited:
                    right_val = values.pop()
                    left_val = values.pop()
                    values.append(self.apply(node, left_val, right_val))
                else:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
            else:
                raise EvaluationError(f"Unknown node type: {type(node).__name__}")
        return values.pop()

    def apply(self, node, left_val, right_val):
        op = node.operator
        if op == ADD:
            return left_val + right_val
        elif op == SUB:
            return left_val - right_val
        elif op == MUL:
            return left_val * right_val
        elif op == DIV:
            if right_val == 0:
                raise DivisionByZeroError(f"Division by zero in {node.to_str()}", node.source_pos, node)
            return truncating_div(left_val, right_val)
        else:
            raise EvaluationError(f"Unknown operator: {op!r}", node.source_pos, node)
