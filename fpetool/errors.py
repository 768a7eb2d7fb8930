"""
fpetool 錯誤類型

所有錯誤皆繼承 ValueError，並帶有出錯的欄位名稱（key / tweak / data / radix / algorithm），
呼叫端可直接顯示訊息，不需另外轉譯。
"""


class FpeError(ValueError):
    """FPE 驗證錯誤的共同基底"""

    field = None

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        if field is not None:
            self.field = field


class MalformedHexError(FpeError):
    """十六進位字串長度為奇數或含非十六進位字元"""


class InvalidKeyLengthError(FpeError):
    field = "key"


class InvalidTweakLengthError(FpeError):
    field = "tweak"


class MessageTooShortError(FpeError):
    field = "data"


class MessageTooLongError(FpeError):
    field = "data"


class InvalidRadixError(FpeError):
    field = "radix"


class UnsupportedAlgorithmError(FpeError):
    field = "algorithm"


class InvalidSymbolError(FpeError):
    """字元不在字母表內，或其索引超出基數範圍"""

    field = "data"

    def __init__(self, symbol: str, radix: int):
        super().__init__(f"字元 '{symbol}' 不符合基數 {radix}")
        self.symbol = symbol
        self.radix = radix
