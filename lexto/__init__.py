"""
泰文分词核心模块

- WordSet: 词典前缀树，三值查询
- LongParseTree: 最长匹配 + 一步前瞻的泰文词边界解析
- ScriptSegmenter: 按字符类型分段，泰文片段交给 LongParseTree
- ThaiTokenizer: 分词会话，提供游标遍历
"""
from .trie import WordSet, LookupStatus
from .charsets import ThaiCharRules, THAI_RULES, is_thai, is_western
# tokenizers 需先于 script_segmenter 导入
from .tokenizers import BaseTokenizer, Token, TokenType, ThaiTokenizer
from .parse_tree import LongParseTree, NewToken, MergeIntoPrevious
from .script_segmenter import ScriptSegmenter, segment_by_script

__all__ = [
    "WordSet",
    "LookupStatus",
    "ThaiCharRules",
    "THAI_RULES",
    "is_thai",
    "is_western",
    "LongParseTree",
    "NewToken",
    "MergeIntoPrevious",
    "ScriptSegmenter",
    "segment_by_script",
    "BaseTokenizer",
    "Token",
    "TokenType",
    "ThaiTokenizer",
]
