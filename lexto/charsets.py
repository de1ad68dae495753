"""
字符分类与泰文正字法规则

泰文的元音、声调符号不能独立成词，需要附着到前后的辅音上。
这里把这些字符按依附方向分成四组，作为 LongParseTree 的静态配置。
"""
import unicodedata
from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class ThaiCharRules:
    """
    泰文依附字符规则

    Attributes:
        front_dependent: 不能作为词首的元音/符号（出现在词首时并入前一个词）
        rear_dependent: 前置元音等，其后的字符必须与之相连
        tonal: 声调符号
        ending: 可以合法结束一个词的符号（目前的修正规则不使用）
    """
    front_dependent: FrozenSet[str] = field(default_factory=frozenset)
    rear_dependent: FrozenSet[str] = field(default_factory=frozenset)
    tonal: FrozenSet[str] = field(default_factory=frozenset)
    ending: FrozenSet[str] = field(default_factory=frozenset)


THAI_RULES = ThaiCharRules(
    # ะ ั า ำ ิ ี ึ ื ุ ู ๅ ็ ์ ํ
    front_dependent=frozenset(
        "ะัาำิีึืุู"
        "ๅ็์ํ"
    ),
    # ั ื เ แ โ ใ ไ ํ
    rear_dependent=frozenset(
        "ัืเแโใไํ"
    ),
    # ่ ้ ๊ ๋
    tonal=frozenset("่้๊๋"),
    # ๆ ฯ
    ending=frozenset("ๆฯ"),
)


def is_thai(char: str) -> bool:
    """判断是否是泰文字符（不含 ฿ 货币符号）"""
    code = ord(char)
    return (
        0x0E01 <= code <= 0x0E3A or
        0x0E40 <= code <= 0x0E5B
    )


def is_western(char: str) -> bool:
    """判断是否是西文字母（拉丁、希腊、西里尔、亚美尼亚）"""
    code = ord(char)
    return (
        0x0041 <= code <= 0x005A or      # A-Z
        0x0061 <= code <= 0x007A or      # a-z
        0x00C0 <= code <= 0x00D6 or      # Latin-1 Supplement（跳过 ×）
        0x00D8 <= code <= 0x02AF or      # Latin-1 后半 + Latin Extended + IPA
        0x0370 <= code <= 0x058F         # Greek, Cyrillic, Armenian
    )


def is_number(char: str) -> bool:
    """判断是否是数字（Unicode N 类，包括泰文数字）"""
    return unicodedata.category(char).startswith('N')


def is_space(char: str) -> bool:
    """判断是否是空白字符"""
    # U+001C-U+001F 是信息分隔符，不算空白
    return char.isspace() and not '\x1c' <= char <= '\x1f'
