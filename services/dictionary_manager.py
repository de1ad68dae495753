"""
词典管理器
负责加载、查询、更新泰文词表
"""
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from lexto.parse_tree import LongParseTree
from lexto.tokenizers.thai import ThaiTokenizer
from lexto.trie import LookupStatus, WordSet

logger = logging.getLogger(__name__)

DEFAULT_DICT_FILE = "lexitron.txt"


class DictionaryUnavailable(OSError):
    """词典文件不存在或无法读取"""


def read_word_list(path: Union[str, Path]) -> List[str]:
    """
    读取词表文件：UTF-8，每行一个词

    空行和以 # 开头的注释行会被跳过。

    Raises:
        DictionaryUnavailable: 文件无法打开或解码
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryUnavailable(f"无法读取词典 {path}: {e}") from e

    words = []
    for line in lines:
        word = line.strip()
        if word and not word.startswith('#'):
            words.append(word)
    return words


class DictionaryManager:
    """词典管理器"""

    def __init__(
        self,
        dictionary_path: Union[str, Path],
        fallback_filename: str = DEFAULT_DICT_FILE
    ):
        self.dictionary_path = Path(dictionary_path)
        self.fallback_filename = fallback_filename
        self._word_set = WordSet()
        self._parse_tree = LongParseTree(self._word_set)
        self._source_path: Optional[Path] = None
        self._loaded = False
        self._lock = threading.Lock()

    def load_all(self):
        """
        加载词典

        依次尝试 dictionary_path、工作目录下的 fallback_filename，
        都失败时使用空词典（泰文将逐字切分）。
        """
        with self._lock:
            self._load_locked()

    def _load_locked(self):
        candidates = [self.dictionary_path, Path(self.fallback_filename)]
        words: List[str] = []
        source: Optional[Path] = None

        for path in candidates:
            try:
                words = read_word_list(path)
            except DictionaryUnavailable as e:
                logger.warning("%s", e)
                continue
            source = path
            break

        if source is None:
            logger.warning("⚠️ 没有可用的词典，使用空词典（泰文将逐字切分）")
        elif source != self.dictionary_path:
            logger.warning("使用备用词典 %s", source)

        # 每次加载都新建 WordSet，正在使用旧词典的会话不受影响
        word_set = WordSet(words)
        self._word_set = word_set
        self._parse_tree = LongParseTree(word_set)
        self._source_path = source
        self._loaded = True

        if source is not None:
            logger.info("✓ 加载词典 %s: %d 个词", source, len(word_set))

    def reload_all(self):
        """重新加载词典"""
        self.load_all()

    def is_loaded(self) -> bool:
        """检查词典是否已加载"""
        return self._loaded

    def is_degraded(self) -> bool:
        """是否处于空词典模式"""
        return self._loaded and self._source_path is None

    @property
    def source_path(self) -> Optional[Path]:
        return self._source_path

    @property
    def word_set(self) -> WordSet:
        return self._word_set

    @property
    def parse_tree(self) -> LongParseTree:
        return self._parse_tree

    def create_tokenizer(self) -> ThaiTokenizer:
        """基于当前词典创建新的分词会话"""
        return ThaiTokenizer(self._parse_tree)

    def get_stats(self) -> Dict:
        """获取词典统计信息"""
        return {
            "words": len(self._word_set),
            "nodes": self._word_set.node_count,
            "source": str(self._source_path) if self._source_path else None,
            "degraded": self.is_degraded(),
        }

    def lookup(self, word: str) -> LookupStatus:
        """查询词的状态"""
        return self._word_set.query(word)

    def contains(self, word: str) -> bool:
        """检查词典是否包含某个词"""
        return word in self._word_set

    def add_entry(self, word: str) -> bool:
        """
        添加词典条目并保存到文件

        Returns:
            是否新增（已存在时返回 False）
        """
        word = word.strip()
        if not word:
            raise ValueError("词不能为空")
        # 词表按行存储，# 开头的行是注释
        if any(c.isspace() for c in word) or word.startswith('#'):
            raise ValueError(f"词不能包含空白字符或以 # 开头: {word!r}")

        with self._lock:
            if word in self._word_set:
                return False

            path = self._writable_path()
            words = self._read_current(path)
            words.append(word)
            self._save_words(path, words)
            self._load_locked()
            return True

    def remove_entry(self, word: str) -> bool:
        """
        删除词典条目并保存到文件

        Returns:
            是否删除（不存在时返回 False）
        """
        word = word.strip()
        with self._lock:
            if word not in self._word_set:
                return False

            path = self._writable_path()
            words = [w for w in self._read_current(path) if w != word]
            self._save_words(path, words)
            self._load_locked()
            return True

    def _writable_path(self) -> Path:
        """当前生效的词典文件，空词典模式下写入主词典路径"""
        return self._source_path or self.dictionary_path

    def _read_current(self, path: Path) -> List[str]:
        try:
            return read_word_list(path)
        except DictionaryUnavailable:
            return []

    def _save_words(self, path: Path, words: List[str]):
        """保存词表到文件"""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            for word in words:
                f.write(word)
                f.write("\n")


def create_tokenizer(
    dictionary_file: Optional[Union[str, Path]] = None,
    fallback_file: str = DEFAULT_DICT_FILE
) -> ThaiTokenizer:
    """
    根据词典文件创建分词器

    词典文件不可用时依次尝试 fallback_file 和空词典。
    """
    if dictionary_file is None:
        dictionary_file = fallback_file
    manager = DictionaryManager(dictionary_file, fallback_filename=fallback_file)
    manager.load_all()
    return manager.create_tokenizer()
