"""
API 响应模型定义
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class TokenInfo(BaseModel):
    """分词结果中的单个 token"""
    text: str = Field(..., description="token 文本（西文已转小写）")
    type: str = Field(..., description="token 类型")
    start: int = Field(..., description="在原文中的起始位置")
    end: int = Field(..., description="在原文中的结束位置")


class TokenizeResponse(BaseModel):
    """分词响应"""
    text: str = Field(..., description="原始文本")
    tokens: List[TokenInfo] = Field(..., description="token 列表")
    words: List[str] = Field(..., description="非空白 token 文本")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": "Hello  123<br>",
                    "tokens": [
                        {"text": "hello", "type": "western", "start": 0, "end": 5},
                        {"text": "  ", "type": "space", "start": 5, "end": 7},
                        {"text": "123", "type": "number", "start": 7, "end": 10},
                        {"text": "<br>", "type": "tag", "start": 10, "end": 14}
                    ],
                    "words": ["hello", "123", "<br>"]
                }
            ]
        }
    }


class BatchTokenizeResponse(BaseModel):
    """批量分词响应"""
    results: List[TokenizeResponse] = Field(..., description="分词结果列表")
    total: int = Field(..., description="处理总数")


class LookupResponse(BaseModel):
    """词典查询响应"""
    word: str = Field(..., description="查询的词")
    status: str = Field(..., description="absent / prefix / word")


class DictionaryStatsResponse(BaseModel):
    """词典统计"""
    words: int = Field(..., description="词数")
    nodes: int = Field(..., description="前缀树节点数")
    source: Optional[str] = Field(None, description="词典文件路径")
    degraded: bool = Field(..., description="是否为空词典模式")


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str = Field(..., description="服务状态")
    version: str = Field(..., description="版本号")
    dictionary_loaded: bool = Field(..., description="词典是否加载")
    dictionary_degraded: bool = Field(..., description="是否为空词典模式")
