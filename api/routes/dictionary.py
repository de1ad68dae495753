"""
词典管理 API 路由
"""
from fastapi import APIRouter, HTTPException
from typing import Dict

from api.models import DictionaryEntryRequest, DictionaryStatsResponse, LookupResponse
from services.dictionary_manager import DictionaryManager

router = APIRouter(prefix="/api/v1/dictionary", tags=["dictionary"])

# 全局词典管理器实例
dict_manager: DictionaryManager = None


def set_dict_manager(dm: DictionaryManager):
    """设置词典管理器实例"""
    global dict_manager
    dict_manager = dm


def _require_manager() -> DictionaryManager:
    if dict_manager is None:
        raise HTTPException(status_code=500, detail="Dictionary manager not initialized")
    return dict_manager


@router.get("/stats", response_model=DictionaryStatsResponse)
async def get_dictionary_stats() -> DictionaryStatsResponse:
    """获取词典统计信息"""
    return DictionaryStatsResponse(**_require_manager().get_stats())


@router.get("/lookup", response_model=LookupResponse)
async def lookup_word(word: str) -> LookupResponse:
    """查询词的状态：absent / prefix / word"""
    status = _require_manager().lookup(word)
    return LookupResponse(word=word, status=status.name.lower())


@router.post("/add")
async def add_dictionary_entry(request: DictionaryEntryRequest) -> Dict:
    """添加词典条目"""
    dm = _require_manager()
    
    try:
        added = dm.add_entry(request.word)
    except (OSError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    
    if not added:
        return {"status": "unchanged", "message": f"'{request.word}' already exists"}
    return {"status": "success", "message": f"Added '{request.word}'"}


@router.delete("/remove")
async def remove_dictionary_entry(word: str) -> Dict:
    """删除词典条目"""
    dm = _require_manager()
    
    try:
        removed = dm.remove_entry(word)
    except OSError as e:
        raise HTTPException(status_code=400, detail=str(e))
    
    if not removed:
        return {"status": "unchanged", "message": f"'{word}' not found"}
    return {"status": "success", "message": f"Removed '{word}'"}


@router.post("/reload")
async def reload_dictionaries() -> Dict:
    """重新加载词典"""
    dm = _require_manager()
    dm.reload_all()
    return {"status": "success", "message": "Dictionary reloaded", **dm.get_stats()}
