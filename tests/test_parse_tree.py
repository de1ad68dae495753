"""
泰文词边界解析测试
"""
import pytest
from lexto.charsets import THAI_RULES, ThaiCharRules
from lexto.parse_tree import LongParseTree, NewToken, MergeIntoPrevious
from lexto.trie import WordSet

SARA_A = chr(0x0E30)    # ะ
SARA_AA = chr(0x0E32)   # า
SARA_E = chr(0x0E40)    # เ
MAI_EK = chr(0x0E48)    # ่
MAI_THO = chr(0x0E49)   # ้


def make_tree(words, rules=THAI_RULES):
    return LongParseTree(WordSet(words), rules)


class TestLookahead:
    """一步前瞻测试"""
    
    def setup_method(self):
        self.tree = make_tree(["กข", "คง"])
    
    def test_end_of_text_is_valid(self):
        """测试文本末尾总是合法边界"""
        assert self.tree.next_word_valid(4, "กขคง")
    
    def test_ascii_is_valid(self):
        """测试 ASCII 字符处总是合法边界"""
        assert self.tree.next_word_valid(2, "กข คง")
        assert self.tree.next_word_valid(2, "กข.")
    
    def test_word_follows(self):
        """测试后面能匹配出词"""
        assert self.tree.next_word_valid(2, "กขคง")
    
    def test_no_word_follows(self):
        """测试后面匹配不出词"""
        assert not self.tree.next_word_valid(1, "กขคง")
        assert not self.tree.next_word_valid(2, "กขคจ")


class TestResolve:
    """最长匹配测试"""
    
    def test_prefers_validated_longest_match(self):
        """测试前瞻通过时选择更长的匹配"""
        tree = make_tree(["กข", "กขค", "ง"])
        result = tree.resolve("กขคง", 0)
        assert result == NewToken(text="กขค", end=3)
    
    def test_falls_back_to_longest_match(self):
        """测试没有匹配通过前瞻时使用最长匹配，且不越过词典"""
        tree = make_tree(["กข", "กขค"])
        result = tree.resolve("กขคง", 0)
        assert result == NewToken(text="กขค", end=3)
    
    def test_rejects_overshooting_match(self):
        """测试最长匹配后无法继续切分时退回较短匹配"""
        tree = make_tree(["กข", "กขค", "คง"])
        result = tree.resolve("กขคง", 0)
        assert result == NewToken(text="กข", end=2)
    
    def test_classic_ambiguity(self):
        """测试 ตากลม：ตาก 和 ตา 都能继续切分时取最长"""
        tree = make_tree(["ตา", "ตาก", "ลม", "กลม"])
        assert tree.resolve("ตากลม", 0) == NewToken(text="ตาก", end=3)
        assert tree.resolve("ตากลม", 3) == NewToken(text="ลม", end=5)
    
    def test_lookahead_is_one_level_deep(self):
        """测试前瞻只看下一个词能否开始，不再向后验证"""
        # กข 之后的 ค 能成词，但 ค 之后的 จ 无法成词；ก + ขคจ 才能完整切分
        tree = make_tree(["ก", "กข", "ขคจ", "ค"])
        assert tree.resolve("กขคจ", 0) == NewToken(text="กข", end=2)
    
    def test_no_match_single_char(self):
        """测试无匹配时单字成词"""
        tree = make_tree([])
        assert tree.resolve("กขค", 1) == NewToken(text="ข", end=2)
    
    def test_tonal_merges(self):
        """测试无匹配的声调符号并入前一个词"""
        tree = make_tree(["กา"])
        text = "กา" + MAI_EK
        assert tree.resolve(text, 0) == NewToken(text="กา", end=2)
        assert tree.resolve(text, 2) == MergeIntoPrevious(text=MAI_EK, end=3)
    
    def test_front_dependent_merges(self):
        """测试无匹配的后置元音并入前一个词"""
        tree = make_tree([])
        assert tree.resolve("ก" + SARA_A, 1) == MergeIntoPrevious(text=SARA_A, end=2)
    
    def test_after_rear_dependent_merges_single_char(self):
        """测试前置元音之后的单字并入前一个词"""
        tree = make_tree([])
        text = SARA_E + "ก"
        assert tree.resolve(text, 0) == NewToken(text=SARA_E, end=1)
        assert tree.resolve(text, 1) == MergeIntoPrevious(text="ก", end=2)
    
    def test_after_rear_dependent_merges_match(self):
        """测试前置元音之后的匹配词并入前一个词"""
        tree = make_tree(["กา"])
        text = SARA_E + "กา"
        assert tree.resolve(text, 1) == MergeIntoPrevious(text="กา", end=3)
    
    def test_start_has_no_previous_char(self):
        """测试起始位置没有前一个字符"""
        tree = make_tree(["กา"])
        assert tree.resolve("กา", 0) == NewToken(text="กา", end=2)
    
    def test_parse_word_instance(self):
        """测试只返回结束位置"""
        tree = make_tree(["กข", "กขค", "ง"])
        assert tree.parse_word_instance("กขคง", 0) == 3
    
    def test_custom_rules(self):
        """测试替换依附字符规则"""
        tree = make_tree([], rules=ThaiCharRules())
        assert tree.resolve("ก" + MAI_THO, 1) == NewToken(text=MAI_THO, end=2)
        
        tree = make_tree([], rules=ThaiCharRules(tonal=frozenset(MAI_THO)))
        assert tree.resolve("ก" + MAI_THO, 1) == MergeIntoPrevious(text=MAI_THO, end=2)


class TestRules:
    """依附字符规则测试"""
    
    def test_sets(self):
        """测试默认规则中的字符"""
        assert SARA_A in THAI_RULES.front_dependent
        assert SARA_AA in THAI_RULES.front_dependent
        assert SARA_E in THAI_RULES.rear_dependent
        assert MAI_EK in THAI_RULES.tonal
        assert chr(0x0E46) in THAI_RULES.ending
        assert len(THAI_RULES.front_dependent) == 14
        assert len(THAI_RULES.rear_dependent) == 8
        assert len(THAI_RULES.tonal) == 4
    
    def test_rules_are_immutable(self):
        """测试规则不可修改"""
        with pytest.raises(AttributeError):
            THAI_RULES.tonal = frozenset()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
