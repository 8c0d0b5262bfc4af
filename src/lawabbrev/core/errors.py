"""
lawabbrev の例外定義

いずれも1つの断片・1つの番号に閉じた決定的なパース失敗を表す。
呼び出し側（Driver）が記録してスキップするか、処理を止めるかを決める。
"""


class LawAbbrevError(ValueError):
    """lawabbrev の基底例外"""


class MalformedNumberError(LawAbbrevError):
    """条・項・号などの番号が非負整数の `_` 区切りとして解釈できない"""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Malformed number: {raw!r}")


class UnrecognizedScopeError(LawAbbrevError):
    """「この条において」等の条件文の一部が既知の形式に一致しない"""

    def __init__(self, segment: str):
        self.segment = segment
        super().__init__(f"Unrecognized scope note: {segment!r}")
