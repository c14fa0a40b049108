"""Unit tests for the lookup data models."""

import pytest

from elasticache_cluster.aws.exceptions import AttributeSetError
from elasticache_cluster.aws.models import ATTRIBUTE_NAMES, CallerContext, ClusterDescriptor


class TestCallerContext:
    """Tests for CallerContext."""

    def test_arn(self):
        """Test the canonical ARN string."""
        context = CallerContext(account_id="123456789012", region="eu-west-1", partition="aws")

        assert context.arn("elasticache", "cluster:abc") == "arn:aws:elasticache:eu-west-1:123456789012:cluster:abc"

    def test_default_partition(self):
        """Test the partition defaults to the standard one."""
        context = CallerContext(account_id="123456789012", region="us-east-1")

        assert context.partition == "aws"


class TestSetTags:
    """Tests for ClusterDescriptor.set_tags."""

    def test_assigns_copy(self):
        """Test the tag map is copied onto the descriptor."""
        tags = {"env": "prod"}
        descriptor = ClusterDescriptor()

        descriptor.set_tags(tags)
        tags["env"] = "dev"

        assert descriptor.tags == {"env": "prod"}

    @pytest.mark.parametrize("tags", [{"env": None}, {"count": 3}, {1: "one"}])
    def test_rejects_non_strings(self, tags):
        """Test non-string keys or values are rejected."""
        descriptor = ClusterDescriptor()

        with pytest.raises(AttributeSetError) as exc_info:
            descriptor.set_tags(tags)

        assert exc_info.value.attribute == "tags"
        assert descriptor.tags == {}


class TestToAttributes:
    """Tests for ClusterDescriptor.to_attributes."""

    def test_full_descriptor(self, descriptor):
        """Test attributes keep their order and unset optionals are skipped."""
        attributes = descriptor.to_attributes()

        expected = [
            name for name in ATTRIBUTE_NAMES
            if name not in ("replication_group_id", "notification_topic_arn")
        ]
        assert list(attributes) == expected
        assert attributes["security_group_ids"] == ["sg-123", "sg-456"]
        assert attributes["cache_nodes"][0] == {
            "id": "0001",
            "address": "n1.example.com",
            "port": 11211,
            "availability_zone": "us-east-1a",
        }
        assert attributes["tags"] == {"team": "platform", "env": "prod"}

    def test_unset_optionals_are_omitted(self):
        """Test optional attributes left as None do not appear."""
        attributes = ClusterDescriptor(cluster_id="abc").to_attributes()

        for name in ("parameter_group_name", "replication_group_id", "notification_topic_arn",
                     "port", "configuration_endpoint", "cluster_address"):
            assert name not in attributes
        assert attributes["cluster_id"] == "abc"
        assert attributes["security_group_names"] == []
        assert attributes["cache_nodes"] == []
