"""
脚本分段器
将混合文本按字符类型分段：空白、西文、数字、泰文、HTML 标签、标点

非泰文的连续片段直接成为一个 token；泰文片段交给 LongParseTree 逐词切分。
"""
from typing import List

from .charsets import is_number, is_space, is_thai, is_western
from .parse_tree import LongParseTree, MergeIntoPrevious
from .tokenizers.base import Token, TokenType


def _is_thai_letter(char: str) -> bool:
    # 泰文数字单独成数字 token
    return is_thai(char) and not is_number(char)


class ScriptSegmenter:
    """
    脚本分段器

    示例：
    输入: "Hello  123<br>"
    输出: [
        Token("hello", WESTERN, 0, 5),
        Token("  ", SPACE, 5, 7),
        Token("123", NUMBER, 7, 10),
        Token("<br>", TAG, 10, 14)
    ]
    """

    def __init__(self, parse_tree: LongParseTree):
        self.parse_tree = parse_tree

    def segment(self, text: str) -> List[Token]:
        """
        对文本进行分段

        Args:
            text: 输入文本

        Returns:
            token 列表，按原文顺序排列
        """
        tokens: List[Token] = []
        if not text:
            return tokens

        i = 0
        length = len(text)

        while i < length:
            char = text[i]

            if is_space(char):
                j = self._run_end(text, i, is_space)
                tokens.append(Token(text[i:j], TokenType.SPACE, i, j))
            elif is_western(char):
                # lower() 可能改变长度（如 İ），end - start 以原文为准
                j = self._run_end(text, i, is_western)
                tokens.append(Token(text[i:j].lower(), TokenType.WESTERN, i, j))
            elif is_number(char):
                j = self._run_end(text, i, is_number)
                tokens.append(Token(text[i:j], TokenType.NUMBER, i, j))
            elif is_thai(char):
                j = self._run_end(text, i, _is_thai_letter)
                self._segment_thai(text[i:j], i, tokens)
            elif char == '<':
                # 标签到下一个 '>' 为止（含），未闭合则到文本末尾
                close = text.find('>', i + 1)
                j = length if close == -1 else close + 1
                tokens.append(Token(text[i:j], TokenType.TAG, i, j))
            else:
                j = i + 1
                tokens.append(Token(char, TokenType.PUNCTUATION, i, j))

            i = j

        return tokens

    def _run_end(self, text: str, start: int, predicate) -> int:
        """从 start 开始，返回连续满足 predicate 的片段结束位置"""
        j = start + 1
        while j < len(text) and predicate(text[j]):
            j += 1
        return j

    def _segment_thai(self, run: str, offset: int, tokens: List[Token]):
        """切分一段连续泰文，结果追加到 tokens"""
        pos = 0
        while pos < len(run):
            result = self.parse_tree.resolve(run, pos)
            start = offset + pos
            end = offset + result.end

            if isinstance(result, MergeIntoPrevious) and tokens and tokens[-1].is_thai():
                previous = tokens[-1]
                previous.text += result.text
                previous.end = end
            else:
                # 片段开头的依附字符前面没有泰文词可接，只能独立成词
                tokens.append(Token(result.text, TokenType.THAI, start, end))

            pos = result.end


# 便捷函数
def segment_by_script(text: str, parse_tree: LongParseTree) -> List[Token]:
    """便捷函数：对文本进行分段"""
    return ScriptSegmenter(parse_tree).segment(text)
