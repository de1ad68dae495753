#!/usr/bin/env python3

"""
启动服务
"""
import logging

import uvicorn
from config import settings

if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    print("🚀 启动泰文分词服务...")
    print(f"📍 API文档: http://localhost:{settings.api_port}/docs")
    
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
