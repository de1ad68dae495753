"""
服务层：词典加载与管理
"""
from .dictionary_manager import (
    DictionaryManager,
    DictionaryUnavailable,
    create_tokenizer,
    read_word_list,
)

__all__ = [
    "DictionaryManager",
    "DictionaryUnavailable",
    "create_tokenizer",
    "read_word_list",
]
