"""JSON formatter for ElastiCache cluster attributes."""

import json
from typing import List

from elasticache_cluster.aws.models import ClusterDescriptor
from elasticache_cluster.formatters.base import BaseFormatter


class JSONFormatter(BaseFormatter):
    """JSON output formatter.

    A single descriptor is rendered as one attribute object, several as a
    list of objects. Unset optional attributes are left out.
    """

    def format(self, data: List[ClusterDescriptor], fields: List[str]) -> str:
        """Format cluster descriptors as JSON.

        Args:
            data: List of ClusterDescriptor objects
            fields: List of attribute names to include in output

        Returns:
            JSON formatted string
        """
        if not data:
            return ""

        documents = []
        for item in data:
            attributes = item.to_attributes()
            documents.append({field: attributes[field] for field in fields if field in attributes})

        payload = documents[0] if len(documents) == 1 else documents
        return json.dumps(payload, indent=2, ensure_ascii=False)
