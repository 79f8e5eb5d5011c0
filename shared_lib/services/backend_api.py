import aiohttp
from typing import Dict, Any
from urllib.parse import quote
import ssl
import certifi

from shared_lib.config import API_BASE_URL, API_JWT
from shared_lib.schemas import Schedule, UserResponse


class BackendAPIError(Exception):
    """Non-2xx response from the schedule backend. `status` is the HTTP status code."""
    def __init__(self, status: int, url: str, response_text: str):
        super().__init__(
            f"Backend API Error: Status {status} for URL {url}. Response: {response_text}"
        )
        self.status = status
        self.url = url
        self.response_text = response_text


class BackendAPIClient:
    """Asynchronous client for the schedule backend."""
    def __init__(self, session: aiohttp.ClientSession, base_url: str, api_jwt: str | None):
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.headers = {"Authorization": f"Bearer {api_jwt}"} if api_jwt else {}

    async def _request(self, sub_url: str) -> Dict[str, Any]:
        """Performs a single GET request; no retries, the session timeout applies."""
        full_url = self.base_url + sub_url
        # certifi bundle instead of the system trust store, which is often missing in Docker.
        ssl_context = ssl.create_default_context(cafile=certifi.where())

        async with self.session.get(full_url, headers=self.headers, ssl=ssl_context) as response:
            if response.ok:
                return await response.json()
            error_text = await response.text()
            raise BackendAPIError(response.status, full_url, error_text)

    async def get_user_by_telegram_id(self, telegram_id: int) -> UserResponse:
        data = await self._request(f"/api/v1/users/by/telegram-id/{telegram_id}")
        return UserResponse.model_validate(data)

    async def get_schedule_by_group_name(self, group_name: str) -> Schedule:
        encoded = quote(group_name, safe="")
        data = await self._request(f"/api/v1/schedule/group/{encoded}")
        return Schedule.model_validate(data)


def create_backend_api_client(session: aiohttp.ClientSession) -> BackendAPIClient:
    """Builds the client from the environment settings."""
    return BackendAPIClient(session, API_BASE_URL, API_JWT)
