"""
API 请求模型定义
"""
from typing import List
from pydantic import BaseModel, Field

from config import settings


class TokenizeRequest(BaseModel):
    """单条分词请求"""
    text: str = Field(..., description="待分词文本", min_length=1, max_length=settings.max_text_length)
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"text": "สวัสดีครับ Hello 123<br>"}
            ]
        }
    }


class BatchTokenizeRequest(BaseModel):
    """批量分词请求"""
    texts: List[str] = Field(
        ..., 
        description="待分词文本列表",
        min_length=1,
        max_length=settings.max_batch_size
    )
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "texts": [
                        "ภาษาไทย",
                        "กินข้าว 2 จาน"
                    ]
                }
            ]
        }
    }


class DictionaryEntryRequest(BaseModel):
    """添加词典条目请求"""
    word: str = Field(..., description="词语（不含空白，不以 # 开头）", min_length=1, pattern=r"^[^\s#]\S*$")
