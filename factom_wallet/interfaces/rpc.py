import logging
from typing import Any, Dict, Optional

import requests

from factom_wallet.core.exceptions import ClientError, RPCError

logger = logging.getLogger(__name__)

class JSONRPCClient:
    """Minimal JSON-RPC 2.0 client over HTTP POST"""

    def __init__(self, url: str, timeout: float = 30.0,
                 user_agent: str = "factom-wallet/1.0",
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
            'User-Agent': user_agent
        })
        self._request_id = 0

    def call(self, method: str, params: Optional[Dict] = None) -> Any:
        """Invoke method and return its result, raising RPCError on an error object"""
        self._request_id += 1
        payload = {
            'jsonrpc': '2.0',
            'id': self._request_id,
            'method': method
        }
        if params is not None:
            payload['params'] = params

        logger.debug(f"RPC {method} -> {self.url}")
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"RPC call {method} failed: {e}")
            raise ClientError(f"{method}: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            # not JSON at all, typically a proxy error page
            logger.error(f"RPC call {method} returned invalid JSON (HTTP {response.status_code})")
            raise ClientError(f"{method}: invalid response body") from e

        error = body.get('error') if isinstance(body, dict) else None
        if error:
            raise RPCError(error.get('code', 0), error.get('message', ''), error.get('data'))

        if not isinstance(body, dict) or 'result' not in body:
            raise ClientError(f"{method}: response has no result")
        return body['result']

    def close(self):
        self.session.close()
