"""
分词相关 API 路由
"""
from fastapi import APIRouter, HTTPException

from api.models import (
    TokenizeRequest, 
    BatchTokenizeRequest,
    TokenizeResponse, 
    BatchTokenizeResponse,
    TokenInfo
)
from lexto.tokenizers import ThaiTokenizer
from services.dictionary_manager import DictionaryManager

router = APIRouter(prefix="/api/v1", tags=["tokenize"])

# 全局词典管理器实例（在 main.py 中初始化）
dict_manager: DictionaryManager = None


def set_dict_manager(dm: DictionaryManager):
    """设置词典管理器实例"""
    global dict_manager
    dict_manager = dm


def _tokenize(tokenizer: ThaiTokenizer, text: str) -> TokenizeResponse:
    tokens = tokenizer.tokenize(text)
    return TokenizeResponse(
        text=text,
        tokens=[
            TokenInfo(text=t.text, type=t.type.value, start=t.start, end=t.end)
            for t in tokens
        ],
        words=[t.text for t in tokens if not t.is_space()]
    )


@router.post("/tokenize", response_model=TokenizeResponse)
async def tokenize_single(request: TokenizeRequest) -> TokenizeResponse:
    """
    对单条文本分词
    
    - 泰文按词典最长匹配切分
    - 空白、西文、数字、HTML 标签、标点各自成 token
    """
    if dict_manager is None:
        raise HTTPException(status_code=500, detail="Dictionary manager not initialized")
    
    # 每个请求使用独立的分词会话，词典树共享
    return _tokenize(dict_manager.create_tokenizer(), request.text)


@router.post("/tokenize/batch", response_model=BatchTokenizeResponse)
async def tokenize_batch(request: BatchTokenizeRequest) -> BatchTokenizeResponse:
    """
    批量分词
    
    - 空文本返回空结果
    """
    if dict_manager is None:
        raise HTTPException(status_code=500, detail="Dictionary manager not initialized")
    
    tokenizer = dict_manager.create_tokenizer()
    results = []
    for text in request.texts:
        if not text:
            results.append(TokenizeResponse(text=text, tokens=[], words=[]))
            continue
        results.append(_tokenize(tokenizer, text))
    
    return BatchTokenizeResponse(
        results=results,
        total=len(request.texts)
    )
