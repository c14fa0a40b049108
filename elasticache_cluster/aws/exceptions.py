"""Custom exceptions for the ElastiCache cluster lookup."""

from typing import Optional


class AWSBaseError(Exception):
    """Base exception for AWS-related errors."""

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        """Initialize AWS error.

        Args:
            message: Error message in Chinese
            suggestion: Suggested solution in Chinese
            original_error: Original exception for debugging
        """
        self.message = message
        self.suggestion = suggestion
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        """Format error message."""
        msg = self.message
        if self.suggestion:
            msg += f"\n建議：{self.suggestion}"
        return msg


class AWSInvalidParameterError(AWSBaseError):
    """Exception raised when a lookup parameter is invalid."""

    def __init__(
        self,
        parameter: str,
        value: str,
        original_error: Optional[Exception] = None
    ):
        """Initialize invalid parameter error.

        Args:
            parameter: Parameter name
            value: Invalid parameter value
            original_error: Original exception
        """
        message = f"無效的參數：{parameter} = '{value}'"
        suggestion = "請檢查參數值是否正確"
        super().__init__(message, suggestion, original_error)


class UpstreamQueryError(AWSBaseError):
    """Exception raised when an AWS API call fails.

    The upstream error text is kept verbatim so callers see exactly what
    ElastiCache (or botocore) reported.
    """

    def __init__(self, operation: str, original_error: Exception):
        """Initialize upstream query error.

        Args:
            operation: AWS operation that failed
            original_error: Original botocore exception
        """
        self.operation = operation
        super().__init__(str(original_error), None, original_error)


class NoResultsError(AWSBaseError):
    """Exception raised when the cluster query matched nothing."""

    def __init__(self, cluster_id: str):
        self.cluster_id = cluster_id
        message = f"查詢沒有結果：找不到叢集 '{cluster_id}'"
        suggestion = "請變更搜尋條件後再試一次"
        super().__init__(message, suggestion)


class AmbiguousResultError(AWSBaseError):
    """Exception raised when the cluster query matched more than one cluster."""

    def __init__(self, cluster_id: str, count: int):
        self.cluster_id = cluster_id
        self.count = count
        message = f"查詢回傳多於一個結果：'{cluster_id}' 符合 {count} 個叢集"
        suggestion = "請使用更精確的搜尋條件"
        super().__init__(message, suggestion)


class TagQueryError(AWSBaseError):
    """Exception raised when listing tags for a cluster fails."""

    def __init__(self, arn: str, original_error: Optional[Exception] = None):
        """Initialize tag query error.

        Args:
            arn: ARN of the cluster whose tags were requested
            original_error: Original exception
        """
        self.arn = arn
        message = f"列出 ElastiCache 叢集標籤時發生錯誤 ({arn}): {original_error}"
        suggestion = "請確認 IAM 角色具有 elasticache:ListTagsForResource 權限"
        super().__init__(message, suggestion, original_error)


class AttributeSetError(AWSBaseError):
    """Exception raised when a computed attribute cannot be assigned."""

    def __init__(self, attribute: str, reason: str):
        self.attribute = attribute
        message = f"設定屬性 {attribute} 時發生錯誤：{reason}"
        super().__init__(message)
