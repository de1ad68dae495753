"""
泰文词边界解析（最长匹配 + 一步前瞻）

给定一段连续泰文和起始位置，找出下一个词的结束位置：
1. 沿词典树向前扫描，记录最长匹配
2. 对每个匹配位置做一步前瞻：该位置之后必须还能再匹配出一个词，
   否则视为"越界"的匹配，优先选用更短但可继续切分的匹配
3. 根据依附字符规则决定新建 token 还是并入前一个 token

前瞻只有一层，不做完整的动态规划回溯。
"""
from dataclasses import dataclass
from typing import Union

from .charsets import THAI_RULES, ThaiCharRules
from .trie import WordSet

# 起始位置之前没有字符时的占位值，不属于任何依附字符集合
NO_CHAR = ""


@dataclass(frozen=True)
class NewToken:
    """解析出一个新词"""
    text: str
    end: int


@dataclass(frozen=True)
class MergeIntoPrevious:
    """解析出的片段需要接到前一个 token 后面"""
    text: str
    end: int


Resolution = Union[NewToken, MergeIntoPrevious]


class LongParseTree:
    """
    泰文最长匹配解析器

    只读取词典，不修改任何 token 列表；由调用方根据返回结果追加或合并。
    """

    def __init__(self, dictionary: WordSet, rules: ThaiCharRules = THAI_RULES):
        self.dictionary = dictionary
        self.rules = rules

    def next_word_valid(self, begin: int, text: str) -> bool:
        """一步前瞻：begin 处能否开始一个可识别的词"""
        if begin == len(text):
            return True
        # ASCII 标点、空格等总是合法边界
        if text[begin] <= '~':
            return True
        return next(self.dictionary.iter_word_ends(text, begin), None) is not None

    def resolve(self, text: str, begin: int) -> Resolution:
        """
        解析从 begin 开始的下一个词

        Args:
            text: 连续的泰文片段
            begin: 起始位置（0 <= begin < len(text)）

        Returns:
            NewToken 或 MergeIntoPrevious，其 end 为下一次扫描的起点
        """
        longest = -1
        longest_valid = -1

        for end in self.dictionary.iter_word_ends(text, begin):
            longest = end
            if self.next_word_valid(end, text):
                longest_valid = end

        prev_char = text[begin - 1] if begin >= 1 else NO_CHAR
        rules = self.rules

        if longest == -1:
            # 词典中没有匹配：单字成词，依附字符并入前一个词
            end = begin + 1
            char = text[begin]
            merge = (
                char in rules.front_dependent or
                char in rules.tonal or
                prev_char in rules.rear_dependent
            )
        else:
            end = longest_valid if longest_valid != -1 else longest
            merge = prev_char in rules.rear_dependent

        piece = text[begin:end]
        if merge:
            return MergeIntoPrevious(text=piece, end=end)
        return NewToken(text=piece, end=end)

    def parse_word_instance(self, text: str, begin: int) -> int:
        """返回从 begin 开始的下一个词的结束位置"""
        return self.resolve(text, begin).end
