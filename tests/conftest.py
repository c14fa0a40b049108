"""Shared fixtures for ElastiCache cluster lookup tests."""

import copy

import pytest

from elasticache_cluster.aws.models import CacheNode, CallerContext, ClusterDescriptor

MEMCACHED_CLUSTER = {
    "CacheClusterId": "my-memcached",
    "ConfigurationEndpoint": {
        "Address": "my-memcached.abc123.cfg.use1.cache.amazonaws.com",
        "Port": 11211,
    },
    "CacheNodeType": "cache.t3.medium",
    "Engine": "memcached",
    "EngineVersion": "1.6.17",
    "CacheClusterStatus": "available",
    "NumCacheNodes": 2,
    "PreferredAvailabilityZone": "Multiple",
    "PreferredMaintenanceWindow": "mon:03:00-mon:04:00",
    "NotificationConfiguration": {
        "TopicArn": "arn:aws:sns:us-east-1:123456789012:cache-events",
        "TopicStatus": "active",
    },
    "CacheSecurityGroups": [
        {"CacheSecurityGroupName": "sg1", "Status": "active"},
    ],
    "CacheParameterGroup": {
        "CacheParameterGroupName": "default.memcached1.6",
        "ParameterApplyStatus": "in-sync",
    },
    "CacheSubnetGroupName": "cache-subnets",
    "CacheNodes": [
        {
            "CacheNodeId": "0001",
            "CacheNodeStatus": "available",
            "Endpoint": {
                "Address": "my-memcached.abc123.0001.use1.cache.amazonaws.com",
                "Port": 11211,
            },
            "CustomerAvailabilityZone": "us-east-1a",
        },
        {
            "CacheNodeId": "0002",
            "CacheNodeStatus": "available",
            "Endpoint": {
                "Address": "my-memcached.abc123.0002.use1.cache.amazonaws.com",
                "Port": 11211,
            },
            "CustomerAvailabilityZone": "us-east-1b",
        },
    ],
    "SecurityGroups": [
        {"SecurityGroupId": "sg-123", "Status": "active"},
    ],
    "SnapshotRetentionLimit": 0,
    "SnapshotWindow": "",
}

REDIS_NODE_CLUSTER = {
    "CacheClusterId": "my-redis-001",
    "CacheNodeType": "cache.r6g.large",
    "Engine": "redis",
    "EngineVersion": "7.0.7",
    "CacheClusterStatus": "available",
    "NumCacheNodes": 1,
    "PreferredAvailabilityZone": "us-east-1a",
    "PreferredMaintenanceWindow": "sun:05:00-sun:06:00",
    "CacheSecurityGroups": [],
    "CacheParameterGroup": {
        "CacheParameterGroupName": "default.redis7",
        "ParameterApplyStatus": "in-sync",
    },
    "CacheSubnetGroupName": "cache-subnets",
    "CacheNodes": [
        {
            "CacheNodeId": "0001",
            "CacheNodeStatus": "available",
            "Endpoint": {
                "Address": "my-redis-001.abc123.0001.use1.cache.amazonaws.com",
                "Port": 6379,
            },
            "CustomerAvailabilityZone": "us-east-1a",
        },
    ],
    "ReplicationGroupId": "my-redis",
    "SecurityGroups": [
        {"SecurityGroupId": "sg-456", "Status": "active"},
        {"SecurityGroupId": "sg-789", "Status": "active"},
    ],
    "SnapshotRetentionLimit": 7,
    "SnapshotWindow": "03:00-05:00",
}


@pytest.fixture
def memcached_cluster():
    """Multi-node Memcached cluster with a configuration endpoint."""
    return copy.deepcopy(MEMCACHED_CLUSTER)


@pytest.fixture
def redis_cluster():
    """Single-node Redis cluster that belongs to a replication group."""
    return copy.deepcopy(REDIS_NODE_CLUSTER)


@pytest.fixture
def context():
    """Caller context for us-east-1 in the standard partition."""
    return CallerContext(account_id="123456789012", region="us-east-1", partition="aws")


@pytest.fixture
def descriptor():
    """Populated ClusterDescriptor for formatter tests."""
    return ClusterDescriptor(
        cluster_id="my-memcached",
        node_type="cache.t3.medium",
        num_cache_nodes=2,
        subnet_group_name="cache-subnets",
        engine="memcached",
        engine_version="1.6.17",
        parameter_group_name="default.memcached1.6",
        security_group_names={"sg1"},
        security_group_ids={"sg-456", "sg-123"},
        maintenance_window="mon:03:00-mon:04:00",
        snapshot_window="",
        snapshot_retention_limit=0,
        availability_zone="Multiple",
        port=11211,
        configuration_endpoint="cfg.example.com:11211",
        cluster_address="cfg.example.com",
        arn="arn:aws:elasticache:us-east-1:123456789012:cluster:my-memcached",
        cache_nodes=[
            CacheNode(id="0001", address="n1.example.com", port=11211, availability_zone="us-east-1a"),
            CacheNode(id="0002", address="n2.example.com", port=11211, availability_zone="us-east-1b"),
        ],
        tags={"team": "platform", "env": "prod"},
    )
