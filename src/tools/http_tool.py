# PURPOSE: Minimal JSON-over-HTTP helper for the remote analysis endpoint.
# CONTEXT: The endpoint proxies an LLM and answers with a camelCase analysis document.

import requests
from typing import Any, Dict, Optional

def post_json(url: str, payload: Dict[str, Any], timeout: Optional[float] = 30.0,
              headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    POST a JSON body and return the decoded JSON response.

    parameters:
    - url: str – full endpoint URL.
    - payload: dict – request body.
    - timeout: float (optional) – max seconds to wait (default: 30).
    - headers: dict (optional) – extra headers such as Authorization.

    returns:
    - dict – parsed JSON body.

    raises:
    - requests.exceptions.RequestException – on connection errors or HTTP error status.
    - ValueError – if the body is not JSON.
    """
    r = requests.post(url, json=payload, timeout=timeout, headers=headers or {})
    r.raise_for_status()  # Ensures HTTP errors raise exceptions instead of returning bad data.
    return r.json()
