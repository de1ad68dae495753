"""
泰文分词服务 HTTP 接口
"""
