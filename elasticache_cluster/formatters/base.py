"""Base formatter interface for output formats."""

from abc import ABC, abstractmethod
from typing import List

from elasticache_cluster.aws.models import ClusterDescriptor


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format(self, data: List[ClusterDescriptor], fields: List[str]) -> str:
        """Format cluster descriptors.

        Args:
            data: List of ClusterDescriptor objects
            fields: List of attribute names to include in output

        Returns:
            Formatted string output
        """
        pass

    @staticmethod
    def _format_field_name(field: str) -> str:
        """Convert field name to display format.

        Args:
            field: Field name (e.g., "node_type")

        Returns:
            Display name (e.g., "Node Type")
        """
        return field.replace("_", " ").title()
