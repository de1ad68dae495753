"""
泰文分词服务 - API 入口
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from api.routes import tokenize_router, dictionary_router, set_dict_manager
from api.models import HealthResponse
from services.dictionary_manager import DictionaryManager

VERSION = "1.0.0"

logger = logging.getLogger(__name__)

# 全局实例
dict_manager: DictionaryManager = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    global dict_manager
    
    logging.basicConfig(level=settings.log_level)
    logger.info("🚀 正在初始化服务...")
    
    # 初始化词典管理器（词典树构建一次，所有请求共享）
    dict_manager = DictionaryManager(
        settings.dictionary_file,
        fallback_filename=settings.fallback_dictionary_file
    )
    dict_manager.load_all()
    logger.info("📚 词典加载完成: %s", dict_manager.get_stats())
    
    # 设置路由依赖
    set_dict_manager(dict_manager)
    
    logger.info("✅ 服务启动完成!")
    
    yield
    
    # 关闭时清理
    logger.info("👋 服务关闭中...")


# 创建 FastAPI 应用
app = FastAPI(
    title="泰文分词服务",
    description="""
    ## 功能
    - 泰文分词：基于词典的最长匹配，带一步前瞻校验
    - 混合文本：空白、西文、数字、HTML 标签、标点按字符类型切分
    - 词典管理：查询、添加、删除、重新加载
    """,
    version=VERSION,
    lifespan=lifespan
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(tokenize_router)
app.include_router(dictionary_router)


@app.get("/", tags=["health"])
async def root():
    """根路径"""
    return {"message": "泰文分词服务", "docs": "/docs"}


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """健康检查"""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        dictionary_loaded=dict_manager is not None and dict_manager.is_loaded(),
        dictionary_degraded=dict_manager is not None and dict_manager.is_degraded()
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
