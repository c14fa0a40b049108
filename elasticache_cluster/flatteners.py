"""Flatteners for nested DescribeCacheClusters response structures."""

from typing import Any, Dict, List, Optional, Set

from elasticache_cluster.aws.models import CacheNode

# Tag keys with this prefix are reserved by AWS
AWS_RESERVED_TAG_PREFIX = "aws:"


class ResponseFlattener:
    """Flattens nested cache cluster structures into plain values.

    Every method tolerates missing keys the same way the API omits them:
    an absent collection flattens to an empty one, an absent optional
    structure flattens to None.
    """

    @staticmethod
    def security_group_names(cache_security_groups: Optional[List[Dict[str, Any]]]) -> Set[str]:
        """Collect names from CacheSecurityGroups.

        Args:
            cache_security_groups: List of {"CacheSecurityGroupName": ..., "Status": ...}

        Returns:
            Set of security group names
        """
        return {
            group["CacheSecurityGroupName"]
            for group in cache_security_groups or []
            if group.get("CacheSecurityGroupName")
        }

    @staticmethod
    def security_group_ids(security_groups: Optional[List[Dict[str, Any]]]) -> Set[str]:
        """Collect ids from SecurityGroups (VPC security group memberships).

        Args:
            security_groups: List of {"SecurityGroupId": ..., "Status": ...}

        Returns:
            Set of security group ids
        """
        return {
            group["SecurityGroupId"]
            for group in security_groups or []
            if group.get("SecurityGroupId")
        }

    @staticmethod
    def cache_nodes(cache_nodes: Optional[List[Dict[str, Any]]]) -> List[CacheNode]:
        """Convert CacheNodes into CacheNode models, keeping response order.

        Args:
            cache_nodes: List of cache node dictionaries

        Returns:
            Ordered list of CacheNode
        """
        nodes = []
        for node in cache_nodes or []:
            endpoint = node.get("Endpoint") or {}
            nodes.append(
                CacheNode(
                    id=node.get("CacheNodeId", ""),
                    address=endpoint.get("Address", ""),
                    port=endpoint.get("Port", 0),
                    availability_zone=node.get("CustomerAvailabilityZone", ""),
                )
            )
        return nodes

    @staticmethod
    def notification_topic_arn(notification_config: Optional[Dict[str, Any]]) -> Optional[str]:
        """Return the SNS topic ARN only when the topic status is "active".

        Args:
            notification_config: NotificationConfiguration dictionary

        Returns:
            Topic ARN, or None if absent or not active
        """
        if not notification_config:
            return None
        if notification_config.get("TopicStatus") != "active":
            return None
        return notification_config.get("TopicArn")

    @staticmethod
    def tags(tag_list: Optional[List[Dict[str, Any]]]) -> Dict[str, Any]:
        """Convert a TagList into a key -> value map without AWS reserved tags.

        Args:
            tag_list: List of {"Key": ..., "Value": ...}

        Returns:
            Tag map
        """
        return {
            tag["Key"]: tag.get("Value", "")
            for tag in tag_list or []
            if not tag["Key"].startswith(AWS_RESERVED_TAG_PREFIX)
        }
