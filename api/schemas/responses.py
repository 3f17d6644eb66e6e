"""
Response envelopes.

Every successful response is ``{"status": "success", "data", "message"}``
and every error is ``{"status": "error", "message", "code"}``.
"""

from typing import Any, Dict, Optional


def success_response(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    return {"status": "success", "data": data, "message": message}


def error_response(message: str, code: Optional[str] = None) -> Dict[str, Any]:
    return {"status": "error", "message": message, "code": code}
