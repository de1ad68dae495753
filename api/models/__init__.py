from .request import TokenizeRequest, BatchTokenizeRequest, DictionaryEntryRequest
from .response import (
    TokenizeResponse, 
    BatchTokenizeResponse, 
    TokenInfo, 
    LookupResponse,
    DictionaryStatsResponse,
    HealthResponse
)

__all__ = [
    "TokenizeRequest",
    "BatchTokenizeRequest", 
    "DictionaryEntryRequest",
    "TokenizeResponse",
    "BatchTokenizeResponse",
    "TokenInfo",
    "LookupResponse",
    "DictionaryStatsResponse",
    "HealthResponse"
]
