"""Field formatters for composite cluster attributes."""

from typing import Any, Dict, Iterable, List, Optional

from elasticache_cluster.aws.models import CacheNode


class FieldFormatter:
    """Formatter for cluster attributes shown in tabular output.

    Handles rendering of composite fields like security group sets,
    cache node lists and tag maps into a single cell.
    """

    @staticmethod
    def format_string_set(values: Optional[Iterable[str]]) -> str:
        """Format a set of strings.

        Args:
            values: Security group names or ids

        Returns:
            Sorted, comma-separated values, or empty string
        """
        if not values:
            return ""
        return ", ".join(sorted(values))

    @staticmethod
    def format_cache_nodes(nodes: Optional[List[CacheNode]]) -> str:
        """Format cache nodes.

        Args:
            nodes: Ordered list of CacheNode

        Returns:
            "{id}={address}:{port}@{availability_zone}" per node, joined by "; "
        """
        if not nodes:
            return ""
        return "; ".join(
            f"{node.id}={node.address}:{node.port}@{node.availability_zone}" for node in nodes
        )

    @staticmethod
    def format_tags(tags: Optional[Dict[str, str]]) -> str:
        """Format tags.

        Args:
            tags: Tag key -> value map

        Returns:
            "{key}={value}" pairs sorted by key, joined by "; "
        """
        if not tags:
            return ""
        return "; ".join(f"{key}={tags[key]}" for key in sorted(tags))

    @staticmethod
    def format_value(field: str, value: Any) -> str:
        """Format any cluster attribute for a table cell.

        Args:
            field: Attribute name
            value: Attribute value

        Returns:
            Cell text; unset optional attributes become an empty string
        """
        if value is None:
            return ""
        if field == "cache_nodes":
            return FieldFormatter.format_cache_nodes(value)
        if field == "tags":
            return FieldFormatter.format_tags(value)
        if isinstance(value, (set, frozenset)):
            return FieldFormatter.format_string_set(value)
        return str(value)
