# memberfy/cors.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

log = logging.getLogger("memberfy.cors")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Origin, X-Requested-With, Content-Type, Accept",
}

class OpenCorsMiddleware(BaseHTTPMiddleware):
    """
    Картинки встраиваются с чужих доменов (клиенты фреймов), поэтому:
      - любой ответ получает открытые CORS-заголовки;
      - любой OPTIONS (preflight или нет) сразу отвечает пустым 200,
        до роутинга.
    """
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request, call_next):
        if request.method == "OPTIONS":
            log.debug(f"[CORS] preflight path={request.url.path}")
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        for k, v in CORS_HEADERS.items():
            response.headers[k] = v
        return response
