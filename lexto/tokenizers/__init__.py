"""
分词器模块
"""
from lexto.tokenizers.base import BaseTokenizer, Token, TokenType
from lexto.tokenizers.thai import ThaiTokenizer


__all__ = [
    "BaseTokenizer",
    "Token",
    "TokenType",
    "ThaiTokenizer",
]
