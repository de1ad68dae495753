"""
分词器基类与 token 定义
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TokenType(Enum):
    """token 类型"""
    SPACE = "space"
    NUMBER = "number"
    WESTERN = "western"
    THAI = "thai"
    TAG = "tag"                  # HTML 标签
    PUNCTUATION = "punctuation"  # 标点及其他符号


@dataclass
class Token:
    """
    分词结果

    start/end 是在原文中的字符偏移，西文 token 的 text 已转小写，
    原文可通过 original[start:end] 取回。
    默认构造的 Token() 表示"没有更多 token"。
    """
    text: str = ""
    type: Optional[TokenType] = None
    start: int = 0
    end: int = 0

    def get_text(self) -> str:
        return self.text

    def get_type(self) -> Optional[TokenType]:
        return self.type

    def is_space(self) -> bool:
        return self.type == TokenType.SPACE

    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    def is_symbol(self) -> bool:
        return self.type == TokenType.PUNCTUATION

    def is_html(self) -> bool:
        return self.type == TokenType.TAG

    def is_thai(self) -> bool:
        return self.type == TokenType.THAI

    def is_western(self) -> bool:
        return self.type == TokenType.WESTERN

    def is_empty(self) -> bool:
        return self.type is None


class BaseTokenizer(ABC):
    """分词器基类"""

    @abstractmethod
    def tokenize(self, text: str) -> List[Token]:
        """分词"""
        pass
