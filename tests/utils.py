class RecordingLexer:
    """包装 LexerStream，记录解析器对令牌流的每一次 next_token / peek 调用"""

    def __init__(self, record, stream):
        self.stream = stream
        self.record = record

    def next_token(self):
        s = "None"
        try:
            token = self.stream.next_token()
            s = token.get_type()
        finally:
            self.record.append(f"next:{s}")
        return token

    def peek(self):
        s = "None"
        try:
            token = self.stream.peek()
            s = token.get_type()
        finally:
            self.record.append(f"peek:{s}")
        return token
