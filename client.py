"""
Mail Relay 客户端

使用示例：
    python client.py
"""

from typing import Optional

import httpx

# ========== 配置 ==========
BASE_URL = "http://localhost:8000"


class MailRelayClient:
    """Mail Relay API 客户端"""

    def __init__(self, base_url: str = BASE_URL, http_client: Optional[httpx.Client] = None):
        """
        Args:
            base_url: 服务地址
            http_client: 可选的 httpx.Client（测试时可传入 fastapi.testclient.TestClient）
        """
        self.base_url = base_url.rstrip("/")
        self._http = http_client or httpx.Client(timeout=10.0)

    def register_user(self, user_name: str, email: str) -> dict:
        """注册用户"""
        response = self._http.post(
            f"{self.base_url}/api/RegisterUser",
            json={"UserName": user_name, "Email": email},
        )
        return response.json()

    def get_user(self, email: str) -> dict:
        """查询用户"""
        response = self._http.get(f"{self.base_url}/api/user/{email}")
        return response.json()

    def list_users(self) -> list:
        """列出所有用户（按邮箱排序）"""
        response = self._http.get(f"{self.base_url}/api/users")
        return response.json()

    def send(self, subject: str, sender: str, receiver: str, body: str) -> dict:
        """发送邮件"""
        text = f"Subject: {subject}\nFrom: {sender}\nTo: {receiver}\n\n{body}"
        response = self._http.post(
            f"{self.base_url}/api/Send",
            content=text.encode("utf-8"),
            headers={"Content-Type": "text/plain; charset=utf-8"},
        )
        return response.json()

    def list_messages(self) -> list:
        """列出所有邮件"""
        response = self._http.get(f"{self.base_url}/api/messages")
        return response.json()

    def init_random(self, seed: Optional[int] = None) -> dict:
        """生成随机数据"""
        response = self._http.post(
            f"{self.base_url}/api/InitRandom",
            content=b"" if seed is None else str(seed).encode("ascii"),
            headers={"Content-Type": "text/plain"},
        )
        return response.json()


def main():
    client = MailRelayClient(BASE_URL)

    print("=" * 50)
    print("Mail Relay 客户端")
    print("=" * 50)

    print("\n[1] 注册用户...")
    print(f"    结果: {client.register_user('Real John', 'john@example.org')}")
    print(f"    结果: {client.register_user('Not a Bob', 'bob@example.org')}")

    print("\n[2] 发送邮件...")
    result = client.send("Test message", "john@example.org", "bob@example.org", "Hello world!!\n")
    print(f"    结果: {result}")

    print("\n[3] 用户列表...")
    for user in client.list_users():
        print(f"    {user}")

    print("\n[4] 邮件列表...")
    for message in client.list_messages():
        print(f"    {message}")


if __name__ == "__main__":
    main()
