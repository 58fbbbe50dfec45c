"""
Mail Relay - 邮件中转服务 API 入口

运行：
    uv run python main.py

或使用 uvicorn：
    uv run uvicorn main:app --host 0.0.0.0 --port 8000 --reload

API 文档：
    http://localhost:8000/docs
"""

import uvicorn

from infrastructure.config import configure_logging, get_settings
from interfaces.api import create_app

settings = get_settings()
configure_logging(settings)

# 导出 FastAPI app (用于 uvicorn)
app = create_app(settings)


if __name__ == "__main__":
    print("=" * 50)
    print(f"启动 {settings.app_name}")
    print("=" * 50)
    print()
    print("API 端点:")
    print("  POST /api/RegisterUser    - 注册用户")
    print("  GET  /api/user/{email}    - 查询用户")
    print("  GET  /api/users           - 用户列表（按邮箱排序）")
    print()
    print("  POST /api/Send            - 发送邮件（纯文本）")
    print("  GET  /api/messages        - 邮件列表")
    print()
    print("  POST /api/InitRandom      - 生成随机数据")
    print()
    print(f"存储: {settings.effective_storage_backend}")
    print("文档: http://localhost:8000/docs")
    print("=" * 50)

    uvicorn.run(app, host="0.0.0.0", port=8000)
