"""FastAPI dependency that deserializes the request body.

Usage:
    @router.post("/users")
    async def create_user(
        params: dict = Depends(DeserializedParams(UserDeserializer)),
    ):
        ...
"""

import json
import logging
from typing import Any

from fastapi import HTTPException, Request

from params_deserializer.core.config import Settings
from params_deserializer.core.deserializer import ParamsDeserializer
from params_deserializer.core.exceptions import TypeMismatch

logger = logging.getLogger(__name__)


class DeserializedParams:
    """Callable dependency returning the deserialized request params.

    Attributes:
        deserializer_cls: Deserializer applied to the params
        include_query: Merge query parameters under the JSON body (body wins)

    Settings are read from the environment on the first request, not when the
    dependency is declared.
    """

    def __init__(
        self,
        deserializer_cls: type[ParamsDeserializer],
        include_query: bool = False,
        settings: Settings | None = None,
    ) -> None:
        self.deserializer_cls = deserializer_cls
        self.include_query = include_query
        self._settings = settings

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings.load()
        return self._settings

    async def __call__(self, request: Request) -> dict[Any, Any]:
        params: dict[str, Any] = dict(request.query_params) if self.include_query else {}
        params.update(await self._read_body(request))

        result = self.deserializer_cls(params).deserialize()

        message = f"Deserialized {request.url.path} with {self.deserializer_cls.__name__}"
        if self.settings.log_deserialization:
            logger.info(message)
        else:
            logger.debug(message)
        return result

    @staticmethod
    async def _read_body(request: Request) -> dict[str, Any]:
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            body = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise HTTPException(status_code=400, detail=f"Invalid JSON body: {e}") from e
        if not isinstance(body, dict):
            raise TypeMismatch("body", "a JSON object", body)
        return body
