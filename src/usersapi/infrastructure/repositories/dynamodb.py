"""DynamoDB-backed user repository (boto3 low-level client).

Items are stored with string attributes ``id`` (hash key), ``name`` and
``email``. Update and delete are conditional on ``attribute_exists(id)``
so a missing key surfaces as ``ConditionalCheckFailedException``, which
is the only client error mapped to :attr:`WriteStatus.NOT_FOUND`.
"""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

from usersapi.domain.users import User, UserInput
from usersapi.infrastructure.repositories.base import ContinuationToken, ScanPage, WriteStatus

logger = logging.getLogger(__name__)

_CONDITION_FAILED = "ConditionalCheckFailedException"
_KEY_EXISTS = "attribute_exists(#id)"


def _user_to_item(user: User) -> dict[str, dict[str, str]]:
    return {
        "id": {"S": user.id},
        "name": {"S": user.name},
        "email": {"S": user.email},
    }


def _item_to_user(item: dict[str, dict[str, Any]]) -> User:
    return User(
        id=item["id"]["S"],
        name=item["name"]["S"],
        email=item["email"]["S"],
    )


def _is_condition_failure(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") == _CONDITION_FAILED


class DynamoUserRepository:
    """User repository over a single DynamoDB table.

    Args:
        table_name: Name of the backing table.
        client: Pre-built ``dynamodb`` client. Built from *region_name* and
            *endpoint_url* when omitted.
        page_size: ``Limit`` sent with each ``Scan`` call, if set.
    """

    def __init__(
        self,
        table_name: str,
        *,
        client: Any = None,
        page_size: int | None = None,
        region_name: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self._table_name = table_name
        self._page_size = page_size
        if client is None:
            client = boto3.client("dynamodb", region_name=region_name, endpoint_url=endpoint_url)
        self._client = client

    @property
    def table_name(self) -> str:
        return self._table_name

    def put(self, user: User) -> None:
        self._client.put_item(TableName=self._table_name, Item=_user_to_item(user))

    def scan_page(self, token: ContinuationToken | None = None) -> ScanPage:
        params: dict[str, Any] = {"TableName": self._table_name}
        if token is not None:
            params["ExclusiveStartKey"] = token
        if self._page_size is not None:
            params["Limit"] = self._page_size

        response = self._client.scan(**params)
        items = [_item_to_user(item) for item in response.get("Items", [])]
        return ScanPage(items=items, next_token=response.get("LastEvaluatedKey"))

    def update(self, user_id: str, fields: UserInput) -> WriteStatus:
        try:
            self._client.update_item(
                TableName=self._table_name,
                Key={"id": {"S": user_id}},
                UpdateExpression="SET #name = :name, #email = :email",
                ConditionExpression=_KEY_EXISTS,
                ExpressionAttributeNames={"#id": "id", "#name": "name", "#email": "email"},
                ExpressionAttributeValues={
                    ":name": {"S": fields.name},
                    ":email": {"S": fields.email},
                },
            )
        except ClientError as exc:
            if _is_condition_failure(exc):
                logger.debug("update skipped, no item for id %s", user_id)
                return WriteStatus.NOT_FOUND
            raise
        return WriteStatus.APPLIED

    def delete(self, user_id: str) -> WriteStatus:
        try:
            self._client.delete_item(
                TableName=self._table_name,
                Key={"id": {"S": user_id}},
                ConditionExpression=_KEY_EXISTS,
                ExpressionAttributeNames={"#id": "id"},
            )
        except ClientError as exc:
            if _is_condition_failure(exc):
                logger.debug("delete skipped, no item for id %s", user_id)
                return WriteStatus.NOT_FOUND
            raise
        return WriteStatus.APPLIED

    def close(self) -> None:
        # botocore clients pool connections per process; nothing to release.
        return None
