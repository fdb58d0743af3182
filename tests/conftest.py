import os

# Fake AWS settings before anything imports boto3 clients; moto must be imported
# before src.tools.dynamodb_tool builds its resource so the stubber is registered.
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-south-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("DDB_USER_TABLE", "stockai_user_state_test")
os.environ.pop("ANALYSIS_ENDPOINT_URL", None)
os.environ.pop("MARKET_TZ", None)

import moto  # noqa: E402,F401
import pytest  # noqa: E402


@pytest.fixture
def tcs():
    return {"name": "Tata Consultancy Services Limited", "symbol": "TCS", "exchange": "NSE", "sector": "IT"}
