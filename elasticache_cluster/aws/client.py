"""AWS ElastiCache client for describing a single cache cluster."""

import logging
from functools import wraps
from typing import Any, Callable, Dict, List

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from elasticache_cluster.aws.exceptions import UpstreamQueryError

logger = logging.getLogger(__name__)


def handle_aws_errors(func: Callable) -> Callable:
    """Decorator to surface botocore failures as UpstreamQueryError.

    Errors are not retried or classified; the original message is kept.

    Args:
        func: Function to wrap

    Returns:
        Wrapped function with error handling
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.debug(f"{func.__name__} failed: {e}")
            raise UpstreamQueryError(func.__name__, e) from e

    return wrapper


class ElastiCacheClient:
    """Thin wrapper over the boto3 ElastiCache client.

    Only the two read-only calls needed by the cluster lookup are exposed.
    """

    def __init__(self, region: str, profile: str = "default"):
        """Initialize ElastiCache client.

        Args:
            region: AWS region name
            profile: AWS profile name (default: "default")
        """
        self.region = region
        self.profile = profile

        # Initialize boto3 session with profile
        self.session = boto3.Session(profile_name=profile, region_name=region)
        self.client = self.session.client("elasticache")

        logger.info(f"Initialized ElastiCache client for region={region}, profile={profile}")

    @handle_aws_errors
    def describe_cache_clusters(self, cluster_id: str) -> List[Dict[str, Any]]:
        """Describe cache clusters matching an identifier, with node details.

        Args:
            cluster_id: Cache cluster identifier

        Returns:
            List of cache cluster dictionaries as returned by the API
        """
        logger.debug(f"Reading ElastiCache Cluster: CacheClusterId={cluster_id}, ShowCacheNodeInfo=True")
        response = self.client.describe_cache_clusters(
            CacheClusterId=cluster_id,
            ShowCacheNodeInfo=True,
        )
        return response.get("CacheClusters", [])

    @handle_aws_errors
    def list_tags(self, arn: str) -> List[Dict[str, str]]:
        """List tags attached to an ElastiCache resource.

        Args:
            arn: Resource ARN

        Returns:
            List of {"Key": ..., "Value": ...} dictionaries
        """
        logger.debug(f"Listing tags for {arn}")
        response = self.client.list_tags_for_resource(ResourceName=arn)
        return response.get("TagList", [])
