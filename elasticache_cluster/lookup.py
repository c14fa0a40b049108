"""Look up a single ElastiCache cache cluster by identifier."""

import logging
from typing import Any, Dict

from elasticache_cluster.aws.client import ElastiCacheClient
from elasticache_cluster.aws.exceptions import (
    AmbiguousResultError,
    AWSInvalidParameterError,
    NoResultsError,
    TagQueryError,
    UpstreamQueryError,
)
from elasticache_cluster.aws.models import CallerContext, ClusterDescriptor
from elasticache_cluster.flatteners import ResponseFlattener
from elasticache_cluster.utils import normalize_cluster_id

logger = logging.getLogger(__name__)

ELASTICACHE_SERVICE = "elasticache"


def lookup_cluster(
    cluster_id: str,
    context: CallerContext,
    client: ElastiCacheClient,
) -> ClusterDescriptor:
    """Describe one cache cluster and flatten it into a ClusterDescriptor.

    Args:
        cluster_id: Cache cluster identifier (case-insensitive)
        context: Account, region and partition used to build the ARN
        client: ElastiCache client to query

    Returns:
        Fully populated ClusterDescriptor

    Raises:
        AWSInvalidParameterError: If cluster_id is blank
        UpstreamQueryError: If the describe call fails
        NoResultsError: If no cluster matches
        AmbiguousResultError: If more than one cluster matches
        TagQueryError: If the tags cannot be listed
        AttributeSetError: If the tag map cannot be assigned
    """
    normalized_id = normalize_cluster_id(cluster_id)
    if not normalized_id:
        raise AWSInvalidParameterError("cluster_id", cluster_id)

    logger.info(f"Looking up ElastiCache cluster {normalized_id}")
    clusters = client.describe_cache_clusters(normalized_id)

    if len(clusters) < 1:
        raise NoResultsError(normalized_id)
    if len(clusters) > 1:
        raise AmbiguousResultError(normalized_id, len(clusters))

    descriptor = _convert_to_model(clusters[0])

    descriptor.arn = context.arn(ELASTICACHE_SERVICE, f"cluster:{descriptor.cluster_id}")

    try:
        tag_list = client.list_tags(descriptor.arn)
    except UpstreamQueryError as e:
        raise TagQueryError(descriptor.arn, e) from e

    descriptor.set_tags(ResponseFlattener.tags(tag_list))

    logger.info(
        f"Found cluster {descriptor.cluster_id} ({descriptor.engine} {descriptor.engine_version}, "
        f"{len(descriptor.cache_nodes)} nodes)"
    )
    return descriptor


def _convert_to_model(cluster: Dict[str, Any]) -> ClusterDescriptor:
    """Convert a DescribeCacheClusters entry to a ClusterDescriptor (without ARN and tags).

    Args:
        cluster: Cache cluster dictionary

    Returns:
        ClusterDescriptor
    """
    info = ClusterDescriptor()

    info.cluster_id = cluster.get("CacheClusterId", "")
    info.node_type = cluster.get("CacheNodeType", "")
    info.num_cache_nodes = cluster.get("NumCacheNodes", 0)
    info.subnet_group_name = cluster.get("CacheSubnetGroupName", "")
    info.engine = cluster.get("Engine", "")
    info.engine_version = cluster.get("EngineVersion", "")
    info.maintenance_window = cluster.get("PreferredMaintenanceWindow", "")
    info.snapshot_window = cluster.get("SnapshotWindow", "")
    info.snapshot_retention_limit = cluster.get("SnapshotRetentionLimit", 0)
    info.availability_zone = cluster.get("PreferredAvailabilityZone", "")

    info.security_group_names = ResponseFlattener.security_group_names(cluster.get("CacheSecurityGroups"))
    info.security_group_ids = ResponseFlattener.security_group_ids(cluster.get("SecurityGroups"))

    parameter_group = cluster.get("CacheParameterGroup")
    if parameter_group is not None:
        info.parameter_group_name = parameter_group.get("CacheParameterGroupName")

    if cluster.get("ReplicationGroupId") is not None:
        info.replication_group_id = cluster["ReplicationGroupId"]

    info.notification_topic_arn = ResponseFlattener.notification_topic_arn(
        cluster.get("NotificationConfiguration")
    )

    # Single-node clusters have no configuration endpoint
    endpoint = cluster.get("ConfigurationEndpoint")
    if endpoint is not None:
        address = endpoint.get("Address", "")
        port = endpoint.get("Port", 0)
        info.port = port
        info.configuration_endpoint = f"{address}:{port}"
        info.cluster_address = address

    info.cache_nodes = ResponseFlattener.cache_nodes(cluster.get("CacheNodes"))

    return info
