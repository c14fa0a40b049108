"""Resolve the account, region and partition a lookup runs in."""

import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from elasticache_cluster.aws.exceptions import AWSInvalidParameterError, UpstreamQueryError
from elasticache_cluster.aws.models import CallerContext

logger = logging.getLogger(__name__)


def resolve_caller_context(
    session: boto3.Session,
    account_id: Optional[str] = None,
    partition: Optional[str] = None,
) -> CallerContext:
    """Build a CallerContext from a boto3 session.

    The account id is looked up through STS unless given explicitly, and the
    partition is derived from the session region unless given explicitly.

    Args:
        session: boto3 session with a region configured
        account_id: Optional account id override
        partition: Optional partition override (e.g., "aws-cn")

    Returns:
        CallerContext for the session

    Raises:
        AWSInvalidParameterError: If the session has no region
        UpstreamQueryError: If the STS call fails
    """
    region = session.region_name
    if not region:
        raise AWSInvalidParameterError("region", "")

    if not account_id:
        try:
            identity = session.client("sts").get_caller_identity()
        except (ClientError, BotoCoreError) as e:
            raise UpstreamQueryError("get_caller_identity", e) from e
        account_id = identity["Account"]
        logger.debug(f"Resolved account id {account_id} through STS")

    if not partition:
        partition = session.get_partition_for_region(region)

    logger.info(f"Caller context: partition={partition}, region={region}, account={account_id}")
    return CallerContext(account_id=account_id, region=region, partition=partition)
