import base64
import requests
from typing import Dict

USER_AGENT = "pipe-octopus-consumption-to-parquet/1.0"


def new_session() -> requests.Session:
    """Create a new requests session (no retry adapter, one attempt per call)"""
    session = requests.Session()

    # Set default headers
    session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})

    return session


def basic_auth_header(api_key: str) -> Dict[str, str]:
    """Authorization header carrying base64(api_key).

    Only the key is encoded, there is no ``user:password`` pairing. The
    metering API expects exactly this form.
    """
    encoded = base64.b64encode(api_key.encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {encoded}"}
