"""
项目配置管理
"""
from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用配置"""
    
    # API配置
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = True
    
    # 路径配置
    base_path: Path = Path(__file__).parent.parent
    dictionary_file: Path = base_path / "dictionaries" / "thai_words.txt"
    fallback_dictionary_file: str = "lexitron.txt"  # 相对于工作目录
    
    # 性能配置
    max_batch_size: int = 100
    max_text_length: int = 10000
    
    # 日志配置
    log_level: str = "INFO"
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# 全局配置实例
settings = Settings()
