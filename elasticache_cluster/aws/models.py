"""Data models for ElastiCache cluster lookups."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from elasticache_cluster.aws.exceptions import AttributeSetError

# Output attribute names, in the order the lookup exposes them
ATTRIBUTE_NAMES = [
    "cluster_id",
    "node_type",
    "num_cache_nodes",
    "subnet_group_name",
    "engine",
    "engine_version",
    "parameter_group_name",
    "replication_group_id",
    "security_group_names",
    "security_group_ids",
    "maintenance_window",
    "snapshot_window",
    "snapshot_retention_limit",
    "availability_zone",
    "notification_topic_arn",
    "port",
    "configuration_endpoint",
    "cluster_address",
    "arn",
    "cache_nodes",
    "tags",
]

# Attributes that stay unset when the upstream structure is absent
OPTIONAL_ATTRIBUTES = {
    "parameter_group_name",
    "replication_group_id",
    "notification_topic_arn",
    "port",
    "configuration_endpoint",
    "cluster_address",
}


@dataclass
class CallerContext:
    """Account, region and partition the lookup runs in."""

    account_id: str
    region: str
    partition: str = "aws"

    def arn(self, service: str, resource: str) -> str:
        """Build the canonical ARN string for a resource in this context.

        Args:
            service: Service namespace (e.g., "elasticache")
            resource: Resource path (e.g., "cluster:my-cluster")

        Returns:
            "arn:{partition}:{service}:{region}:{account_id}:{resource}"
        """
        return f"arn:{self.partition}:{service}:{self.region}:{self.account_id}:{resource}"


@dataclass
class CacheNode:
    """A single cache node within a cluster."""

    id: str = ""
    address: str = ""
    port: int = 0
    availability_zone: str = ""


@dataclass
class ClusterDescriptor:
    """Flattened view of one ElastiCache cache cluster."""

    cluster_id: str = ""
    node_type: str = ""
    num_cache_nodes: int = 0
    subnet_group_name: str = ""
    engine: str = ""
    engine_version: str = ""
    parameter_group_name: Optional[str] = None
    replication_group_id: Optional[str] = None
    security_group_names: Set[str] = field(default_factory=set)
    security_group_ids: Set[str] = field(default_factory=set)
    maintenance_window: str = ""
    snapshot_window: str = ""
    snapshot_retention_limit: int = 0
    availability_zone: str = ""
    notification_topic_arn: Optional[str] = None
    port: Optional[int] = None
    configuration_endpoint: Optional[str] = None
    cluster_address: Optional[str] = None
    arn: str = ""
    cache_nodes: List[CacheNode] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)

    def set_tags(self, tags: Dict[str, Any]) -> None:
        """Assign the tag map, rejecting anything that is not str -> str.

        Raises:
            AttributeSetError: If a key or value is not a string
        """
        for key, value in tags.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise AttributeSetError("tags", f"標籤 {key!r} 的鍵或值不是字串 ({value!r})")
        self.tags = dict(tags)

    def to_attributes(self) -> Dict[str, Any]:
        """Return the output attributes as plain, serializable values.

        Optional attributes that were never set are omitted.
        """
        attributes: Dict[str, Any] = {}
        for name in ATTRIBUTE_NAMES:
            value = getattr(self, name)
            if name in OPTIONAL_ATTRIBUTES and value is None:
                continue
            if isinstance(value, set):
                value = sorted(value)
            elif name == "cache_nodes":
                value = [
                    {
                        "id": node.id,
                        "address": node.address,
                        "port": node.port,
                        "availability_zone": node.availability_zone,
                    }
                    for node in value
                ]
            elif name == "tags":
                value = dict(value)
            attributes[name] = value
        return attributes
