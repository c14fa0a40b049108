"""CLI entry point for the ElastiCache cluster lookup."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from elasticache_cluster.aws.client import ElastiCacheClient
from elasticache_cluster.aws.context import resolve_caller_context
from elasticache_cluster.aws.exceptions import AWSBaseError
from elasticache_cluster.field_formatter import FieldFormatter
from elasticache_cluster.formatters.csv_formatter import CSVFormatter
from elasticache_cluster.formatters.json_formatter import JSONFormatter
from elasticache_cluster.formatters.markdown_formatter import MarkdownFormatter
from elasticache_cluster.lookup import lookup_cluster
from elasticache_cluster.utils import (
    VALID_OUTPUT_FORMATS,
    ensure_output_dir,
    parse_info_types,
    setup_logger,
)

app = typer.Typer(
    help="ElastiCache Cluster Lookup - Describe one ElastiCache cache cluster as flat attributes"
)
console = Console()
err_console = Console(stderr=True)

FORMATTERS = {
    "json": JSONFormatter,
    "csv": CSVFormatter,
    "markdown": MarkdownFormatter,
}


@app.command()
def main(
    cluster_id: str = typer.Option(..., "--cluster-id", "-c", help="叢集 ID (必填，不分大小寫)"),
    region: str = typer.Option(..., "--region", "-r", envvar="AWS_REGION", help="AWS Region (必填)"),
    profile: str = typer.Option(
        "default", "--profile", "-p", envvar="AWS_PROFILE", help="AWS Profile (預設: default)"
    ),
    account_id: Optional[str] = typer.Option(
        None,
        "--account-id",
        help="AWS 帳號 ID (預設: 透過 STS 查詢)"
    ),
    partition: Optional[str] = typer.Option(
        None,
        "--partition",
        help="AWS Partition (預設: 依 Region 判斷)"
    ),
    info_type: str = typer.Option(
        "all",
        "--info-type",
        "-i",
        help="欄位選擇，逗號分隔或 'all' (預設: all)"
    ),
    output_format: str = typer.Option(
        "json",
        "--output-format",
        "-f",
        help="輸出格式：json、csv 或 markdown (預設: json)"
    ),
    output_file: Optional[str] = typer.Option(
        None,
        "--output-file",
        "-o",
        help="輸出檔案路徑 (預設: 標準輸出)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="啟用詳細日誌輸出"
    ),
):
    """Look up one ElastiCache cache cluster and print its attributes.

    Examples:
        # Print all attributes as JSON
        elasticache-cluster -c my-redis -r us-east-1

        # Select specific attributes
        elasticache-cluster -c my-redis -r us-east-1 -i engine,engine-version,cache-nodes

        # Write a Markdown table to a file
        elasticache-cluster -c my-redis -r us-east-1 -f markdown -o cluster.md
    """
    logger = setup_logger(verbose)

    try:
        logger.info("=== ElastiCache Cluster Lookup ===")
        logger.info(f"Cluster: {cluster_id}")
        logger.info(f"Region: {region}")
        logger.info(f"Profile: {profile}")
        logger.info(f"Info type: {info_type}")
        logger.info(f"Output format: {output_format}")

        try:
            fields = parse_info_types(info_type)
        except ValueError as e:
            err_console.print(f"[red]錯誤：{e}[/red]")
            raise typer.Exit(1)

        if output_format.lower() not in VALID_OUTPUT_FORMATS:
            err_console.print(
                f"[red]錯誤：無效的輸出格式 '{output_format}'。"
                f"有效格式：{', '.join(VALID_OUTPUT_FORMATS)}[/red]"
            )
            raise typer.Exit(1)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=err_console,
            transient=True,
        ) as progress:
            task = progress.add_task(f"正在查詢 ElastiCache 叢集 {cluster_id}...", total=None)

            try:
                client = ElastiCacheClient(region=region, profile=profile)
                context = resolve_caller_context(client.session, account_id=account_id, partition=partition)
                descriptor = lookup_cluster(cluster_id, context, client)
            except AWSBaseError as e:
                progress.stop()
                err_console.print(f"[red]錯誤：{e}[/red]")
                raise typer.Exit(1)

            progress.update(task, completed=True)

        formatter = FORMATTERS[output_format.lower()]()
        formatted_output = formatter.format([descriptor], fields)

        if output_file is None:
            typer.echo(formatted_output)
            return

        # Show the attributes in the terminal when writing to a file
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Attribute")
        table.add_column("Value")
        for field in fields:
            table.add_row(field, FieldFormatter.format_value(field, getattr(descriptor, field)))
        console.print(table)

        output_path = Path(ensure_output_dir(output_file))
        output_path.write_text(formatted_output, encoding="utf-8")

        console.print(f"\n[bold green]✓[/bold green] 輸出檔案已儲存：{output_path}")
        logger.info(f"輸出檔案已儲存：{output_path}")

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        err_console.print("\n[yellow]操作已取消[/yellow]")
        logger.info("操作已取消")
        raise typer.Exit(130)
    except Exception as e:
        err_console.print(f"[red]未預期的錯誤：{e}[/red]")
        logger.exception("未預期的錯誤")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
