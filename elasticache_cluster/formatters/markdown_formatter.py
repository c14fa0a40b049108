"""Markdown formatter for ElastiCache cluster attributes."""

from typing import List

from elasticache_cluster.aws.models import ClusterDescriptor
from elasticache_cluster.field_formatter import FieldFormatter
from elasticache_cluster.formatters.base import BaseFormatter


class MarkdownFormatter(BaseFormatter):
    """Markdown table output formatter."""

    # Numeric fields that should be right-aligned
    NUMERIC_FIELDS = {"num_cache_nodes", "snapshot_retention_limit", "port"}

    def format(self, data: List[ClusterDescriptor], fields: List[str]) -> str:
        """Format cluster descriptors as a Markdown table.

        Args:
            data: List of ClusterDescriptor objects
            fields: List of attribute names to include in output

        Returns:
            Markdown table formatted string
        """
        if not data:
            return ""

        lines = []

        header = [self._format_field_name(field) for field in fields]
        lines.append("| " + " | ".join(header) + " |")

        separators = []
        for field in fields:
            if field in self.NUMERIC_FIELDS:
                separators.append("---:")
            else:
                separators.append("---")
        lines.append("| " + " | ".join(separators) + " |")

        for item in data:
            row = [
                self._escape(FieldFormatter.format_value(field, getattr(item, field, None)))
                for field in fields
            ]
            lines.append("| " + " | ".join(row) + " |")

        return "\n".join(lines)

    @staticmethod
    def _escape(cell: str) -> str:
        """Escape pipe characters so tag values cannot break the table."""
        return cell.replace("|", "\\|")
