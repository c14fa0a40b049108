"""CSV formatter for ElastiCache cluster attributes."""

import csv
import io
from typing import List

from elasticache_cluster.aws.models import ClusterDescriptor
from elasticache_cluster.field_formatter import FieldFormatter
from elasticache_cluster.formatters.base import BaseFormatter


class CSVFormatter(BaseFormatter):
    """CSV output formatter."""

    def format(self, data: List[ClusterDescriptor], fields: List[str]) -> str:
        """Format cluster descriptors as CSV.

        Args:
            data: List of ClusterDescriptor objects
            fields: List of attribute names to include in output

        Returns:
            CSV formatted string
        """
        if not data:
            return ""

        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow([self._format_field_name(field) for field in fields])

        for item in data:
            row = [FieldFormatter.format_value(field, getattr(item, field, None)) for field in fields]
            writer.writerow(row)

        return output.getvalue()
