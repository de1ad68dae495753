from .tokenize import router as tokenize_router
from .tokenize import set_dict_manager as _set_tokenize_dict_manager
from .dictionary import router as dictionary_router
from .dictionary import set_dict_manager as _set_dictionary_dict_manager


def set_dict_manager(dm):
    """为所有路由设置词典管理器实例"""
    _set_tokenize_dict_manager(dm)
    _set_dictionary_dict_manager(dm)


__all__ = [
    "tokenize_router",
    "dictionary_router",
    "set_dict_manager"
]
