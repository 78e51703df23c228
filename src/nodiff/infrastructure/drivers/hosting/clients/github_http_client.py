from typing import Any

import httpx

API_VERSION = "2022-11-28"


class GitHubHttpClient:
    def __init__(self, token: str, base_url: str = "https://api.github.com", timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": "nodiff-action",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def post(self, path: str, json_data: dict[str, Any]) -> httpx.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        async with httpx.AsyncClient() as client:
            return await client.post(
                url, headers=self._get_headers(), json=json_data, timeout=self._timeout
            )
