"""
泰文分词器（带游标的分词会话）
"""
import logging
from typing import Iterator, List, Tuple

from ..parse_tree import LongParseTree
from ..script_segmenter import ScriptSegmenter
from .base import BaseTokenizer, Token

logger = logging.getLogger(__name__)


class ThaiTokenizer(BaseTokenizer):
    """
    泰文分词器

    词典解析树只读、可在多个会话间共享；token 列表和游标属于会话自身，
    不能跨线程共享同一个 ThaiTokenizer。

    游标位于 token 之间：next() 返回游标后的 token 并前移，
    previous() 后移并返回游标后的 token。
    """

    def __init__(self, parse_tree: LongParseTree):
        self.parse_tree = parse_tree
        self.segmenter = ScriptSegmenter(parse_tree)
        self._tokens: List[Token] = []
        self._current = 0
        self._text = ""

    def set_text(self, text: str):
        """设置新文本并完成分词，空文本不处理（保留之前的结果）"""
        if not text:
            logger.debug("忽略空文本，保留之前的分词结果")
            return

        self._tokens = self.segmenter.segment(text)
        self._text = text
        self._current = 0

    def tokenize(self, text: str) -> List[Token]:
        """分词，返回完整的 token 列表"""
        self.set_text(text)
        return list(self._tokens)

    def get_text(self) -> str:
        """原始文本"""
        return self._text

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return tuple(self._tokens)

    # 游标操作

    def first(self) -> Token:
        """第一个 token（不移动游标）"""
        if not self._tokens:
            return Token()
        return self._tokens[0]

    def next(self) -> Token:
        """返回下一个 token，已到末尾时返回空 token"""
        if self.has_next():
            result = self._tokens[self._current]
            self._current += 1
            return result
        return Token()

    def previous(self) -> Token:
        """返回上一个 token，已到开头时返回空 token"""
        if self.has_previous():
            self._current -= 1
            return self._tokens[self._current]
        return Token()

    def has_next(self) -> bool:
        return self._current < len(self._tokens)

    def has_previous(self) -> bool:
        return self._current > 0

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(list(self._tokens))

