"""Request context middleware.

This module provides middleware for:
- Request tracing with unique IDs
- Binding the caller's identity into log and audit context
"""

import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from travlr.core.audit.listeners import clear_audit_context, set_audit_context
from travlr.core.auth.backend import decode_access_token
from travlr.core.auth.dependencies import parse_authorization_header
from travlr.core.errors import AppException
from travlr.core.logging.middleware import get_client_ip


class AuthContextMiddleware(BaseHTTPMiddleware):
    """Middleware that records who is making the request.

    When a valid access token is present its user id and role are bound
    to the structlog context and the audit context. Invalid or missing
    tokens are ignored here; rejection is left to the route dependencies.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process the request and bind caller context.

        Args:
            request: The incoming request
            call_next: The next middleware/handler

        Returns:
            The response from the handler
        """
        user_id = None
        auth_header = request.headers.get("Authorization")
        if auth_header:
            try:
                claims = decode_access_token(parse_authorization_header(auth_header))
            except AppException:
                claims = None

            if claims:
                user_id = claims.user_id
                request.state.user_id = user_id
                structlog.contextvars.bind_contextvars(
                    user_id=str(user_id),
                    role=str(claims.role),
                )

        set_audit_context(
            user_id=user_id,
            request_id=getattr(request.state, "request_id", None),
            ip_address=get_client_ip(request),
            user_agent=request.headers.get("User-Agent"),
        )

        try:
            return await call_next(request)
        finally:
            clear_audit_context()


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that adds a unique request ID to each request.

    The request ID is added to:
    - request.state.request_id
    - Response header X-Request-ID
    - Structlog context
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process the request and add request ID.

        Args:
            request: The incoming request
            call_next: The next middleware/handler

        Returns:
            The response with X-Request-ID header
        """
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        structlog.contextvars.unbind_contextvars("request_id", "user_id", "role")

        return response
