# PURPOSE: Helper functions to interact with DynamoDB for per-user dashboard state.
# CONTEXT: Used by state_manager to save, fetch, and update preferences and holdings.

from __future__ import annotations
import os
import json
from decimal import Decimal
from typing import Any, Dict, Optional
import boto3
from botocore.exceptions import ClientError

# Get table name and region from environment, with safe defaults for local use.
_TABLE = os.getenv("DDB_USER_TABLE", "stockai_user_state")
_REGION = os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "ap-south-1"

# Connect to DynamoDB using boto3’s high-level resource API.
_dynamodb = boto3.resource("dynamodb", region_name=_REGION)
_table = _dynamodb.Table(_TABLE)


def _to_ddb(value: Any) -> Any:
    """DynamoDB rejects Python floats; round-trip through JSON to get Decimals."""
    return json.loads(json.dumps(value), parse_float=Decimal)


def _from_ddb(value: Any) -> Any:
    """Turn Decimals back into int/float so callers get plain JSON types."""
    if isinstance(value, list):
        return [_from_ddb(v) for v in value]
    if isinstance(value, dict):
        return {k: _from_ddb(v) for k, v in value.items()}
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value


def get_item(user_id: str) -> Optional[Dict[str, Any]]:
    """
    Retrieve one item (by user_id) from DynamoDB.

    returns:
    - dict or None – the stored record with plain numbers, or None if not found.

    raises:
    - RuntimeError – if the DynamoDB request fails (wraps ClientError for readability).
    """
    try:
        res = _table.get_item(Key={"user_id": user_id})
        item = res.get("Item")
        return _from_ddb(item) if item is not None else None
    except ClientError as e:
        raise RuntimeError(f"DDB get_item failed: {e.response['Error']['Message']}")


def put_item(item: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert or replace a full record (must include 'user_id').

    raises:
    - RuntimeError – if DynamoDB put_item fails.
    """
    try:
        _table.put_item(Item=_to_ddb(item))
        return {"ok": True}
    except ClientError as e:
        raise RuntimeError(f"DDB put_item failed: {e.response['Error']['Message']}")


def update_json(user_id: str, path: str, value: Any) -> Dict[str, Any]:
    """
    Update a single top-level attribute, creating the item if needed.

    parameters:
    - user_id: str – which record to update.
    - path: str – top-level field name (e.g. 'preferences' or 'holdings').
    - value: Any – the new value to set.

    raises:
    - RuntimeError – if the update fails (wraps boto3 ClientError).
    """
    try:
        _table.update_item(
            Key={"user_id": user_id},
            UpdateExpression="SET #k = :v",
            ExpressionAttributeNames={"#k": path},
            ExpressionAttributeValues={":v": _to_ddb(value)},
        )
        return {"ok": True}
    except ClientError as e:
        raise RuntimeError(f"DDB update_item failed: {e.response['Error']['Message']}")
