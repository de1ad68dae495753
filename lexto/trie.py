"""
词典前缀树（WordSet）

以字符链形式存储词典，支持三值查询：
- ABSENT: 字典中不存在以该串为前缀的词
- PREFIX: 该串是某些词的前缀，但本身不是词
- WORD:   该串本身是词典中的词
"""
from enum import IntEnum
from typing import Dict, Iterable, Iterator, List


class LookupStatus(IntEnum):
    """查询结果"""
    ABSENT = -1
    PREFIX = 0
    WORD = 1


class WordSet:
    """
    基于节点数组的前缀树

    节点以整数下标存储，根节点为 0：
    - _children[i]: 字符 -> 子节点下标
    - _terminal[i]: 从根到该节点的字符链是否为完整词

    构建完成后只读，可在多个分词会话之间共享。
    """

    __slots__ = ("_children", "_terminal", "_word_count")

    def __init__(self, words: Iterable[str] = ()):
        self._children: List[Dict[str, int]] = [{}]
        self._terminal: List[bool] = [False]
        self._word_count = 0
        for word in words:
            self.add(word)

    def add(self, word: str):
        """添加词（重复添加无副作用）"""
        # 空串会把根节点标成词，直接忽略
        if not word:
            return

        node = 0
        for char in word:
            child = self._children[node].get(char)
            if child is None:
                child = len(self._children)
                self._children[node][char] = child
                self._children.append({})
                self._terminal.append(False)
            node = child

        if not self._terminal[node]:
            self._terminal[node] = True
            self._word_count += 1

    def query(self, candidate: str) -> LookupStatus:
        """查询候选串的状态（只读遍历，不创建节点）"""
        node = 0
        for char in candidate:
            node = self._children[node].get(char, -1)
            if node == -1:
                return LookupStatus.ABSENT

        if self._terminal[node]:
            return LookupStatus.WORD
        return LookupStatus.PREFIX

    def iter_word_ends(self, text: str, begin: int) -> Iterator[int]:
        """
        从 begin 开始沿树单次遍历，依次产出所有使 text[begin:end] 为词的 end

        等价于对 L = 1, 2, ... 逐个调用 query(text[begin:begin+L])，
        遇到 ABSENT 即停止。
        """
        node = 0
        children = self._children
        terminal = self._terminal
        for end in range(begin + 1, len(text) + 1):
            node = children[node].get(text[end - 1], -1)
            if node == -1:
                return
            if terminal[node]:
                yield end

    def __contains__(self, word: str) -> bool:
        return self.query(word) == LookupStatus.WORD

    def __len__(self) -> int:
        return self._word_count

    @property
    def node_count(self) -> int:
        """节点数（含根节点）"""
        return len(self._children)
