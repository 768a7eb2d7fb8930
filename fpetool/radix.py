"""
fpetool 數字字串編解碼模組

字母表固定為 0-9、A-Z、a-z，基數 radix 時只使用前 radix 個字元。
整數使用 Python 原生大數，radix 62、長度 20 以上也不會溢位。
"""

from fpetool.errors import InvalidRadixError, InvalidSymbolError

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
MIN_RADIX = 2
MAX_RADIX = len(ALPHABET)  # 62

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def check_radix(radix: int) -> None:
    """基數必須介於 2 到 62"""
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidRadixError(f"基數必須介於 {MIN_RADIX} 與 {MAX_RADIX} 之間: {radix}")


def symbols_for(radix: int) -> str:
    """回傳該基數可用的字元"""
    check_radix(radix)
    return ALPHABET[:radix]


def str_to_num(s: str, radix: int) -> int:
    """
    將數字字串轉為整數（最高位在左）

    Raises:
        InvalidSymbolError: 字元不在字母表內或索引 >= radix
    """
    num = 0
    for ch in s:
        digit = _INDEX.get(ch)
        if digit is None or digit >= radix:
            raise InvalidSymbolError(ch, radix)
        num = num * radix + digit
    return num


def num_to_str(num: int, radix: int, length: int) -> str:
    """
    將整數轉為固定長度的數字字串，左側補 '0'

    Args:
        num: 非負整數，必須小於 radix ** length
        radix: 基數
        length: 輸出長度

    Returns:
        長度恰為 length 的字串
    """
    if num < 0 or num >= radix ** length:
        raise ValueError(f"數值無法以 {length} 位 {radix} 進位表示")

    digits = []
    while num:
        num, rem = divmod(num, radix)
        digits.append(ALPHABET[rem])

    return "".join(reversed(digits)).rjust(length, ALPHABET[0])
