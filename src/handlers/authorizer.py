"""Lambda request authorizer: validates the Clerk bearer token on API calls."""

import asyncio
from typing import Any

from core.auth import get_auth_provider
from core.errors import AuthenticationError


def _bearer_token(event: dict[str, Any]) -> str:
    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
    auth = headers.get("authorization", "")
    if auth.lower().startswith("bearer "):
        return auth[len("bearer "):].strip()
    query_params = event.get("queryStringParameters") or {}
    return query_params["token"]


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    # AuthProvider methods are async to support future providers with async HTTP clients.
    # ClerkAuthProvider's underlying SDK calls are synchronous, so asyncio.run() bridges
    # the gap in this sync Lambda handler.
    try:
        token = _bearer_token(event)
        auth_provider = get_auth_provider()
        auth_user = asyncio.run(auth_provider.verify_token(token))
        return _allow_policy(event["methodArn"], auth_user.user_id)
    except (KeyError, AuthenticationError):
        return _deny_policy(event["methodArn"])


def _allow_policy(method_arn: str, user_id: str) -> dict[str, Any]:
    return {
        "principalId": user_id,
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [{"Action": "execute-api:Invoke", "Effect": "Allow", "Resource": method_arn}],
        },
        "context": {"userId": user_id},
    }


def _deny_policy(method_arn: str) -> dict[str, Any]:
    return {
        "principalId": "unauthorized",
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [{"Action": "execute-api:Invoke", "Effect": "Deny", "Resource": method_arn}],
        },
    }
