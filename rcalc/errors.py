class ParserGeneratorError(Exception):
    pass


class ParserGeneratorWarning(Warning):
    pass


class LexingError(Exception):
    def __init__(self, message, source_pos, char=None):
        self.message = message
        self.source_pos = source_pos
        self.char = char

    def __str__(self):
        return str(self.message)

    def get_source_pos(self):
        return self.source_pos

    def __repr__(self):
        return f'LexingError({self.message!r}, {self.source_pos!r})'


class ParsingError(Exception):
    def __init__(self, message, source_pos, token=None):
        self.message = message
        self.source_pos = source_pos
        self.token = token

    def __str__(self):
        return str(self.message)

    def get_source_pos(self):
        return self.source_pos

    def __repr__(self):
        return f'ParsingError({self.message!r}, {self.source_pos!r})'


class EvaluationError(Exception):
    def __init__(self, message, source_pos=None, node=None):
        self.message = message
        self.source_pos = source_pos
        self.node = node

    def __str__(self):
        return str(self.message)

    def get_source_pos(self):
        return self.source_pos

    def __repr__(self):
        return f'{type(self).__name__}({self.message!r}, {self.source_pos!r})'


class DivisionByZeroError(EvaluationError):
    pass
