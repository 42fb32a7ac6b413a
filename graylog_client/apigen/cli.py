"""
graylog-apigen 命令行入口模块。

读取 Swagger 1.2 API 描述文档（/api-docs），生成对应的 Python 客户端模块。

    graylog-apigen --url http://graylog:12900/api-docs --module GraylogApi --file graylog_api.py
"""
import logging
import sys
from pathlib import Path

import click

from graylog_client import __version__
from graylog_client.apigen.codegen import generate
from graylog_client.cli import setup_logging
from graylog_client.exceptions import FetchError


def _check_url(ctx, param, value):
    if not value.rstrip("/").endswith("/api-docs"):
        raise click.BadParameter("must end in /api-docs or /api-docs/")
    return value


def _check_module(ctx, param, value):
    if not value.isidentifier():
        raise click.BadParameter("must be a valid Python identifier")
    return value


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--url", "-u", required=True, callback=_check_url, help="API description URL ending in /api-docs")
@click.option("--module", "-m", "module_name", required=True, callback=_check_module, help="Generated client class name")
@click.option("--file", "-f", "output", type=click.Path(dir_okay=False), help="Output file (stdout if omitted)")
@click.version_option(version=__version__)
def cli(verbose, url, module_name, output):
    """Generate a Python API client from a Swagger 1.2 description."""
    setup_logging(verbose)
    logger = logging.getLogger("graylog-apigen")

    try:
        source = generate(url, module_name)
    except FetchError as e:
        click.echo(f"Error: {e.message}" + (f" ({e.detail})" if e.detail else ""), err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(source)
        logger.info(f"Generated {output}")
        if verbose:
            click.echo(f"Generated {output}")
    else:
        click.echo(source, nl=False)


def main():
    """CLI 入口函数。"""
    cli()


if __name__ == "__main__":
    main()
