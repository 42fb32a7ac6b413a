"""
graylog 命令行入口模块。

将一条消息（以及任意 key:value 附加字段）发送到 Graylog HTTP 输入端。

    graylog --message "backup done" --level info duration:42 job=nightly
"""
import logging
import sys

import click

from graylog_client import __version__
from graylog_client.client import send_event
from graylog_client.config import DEFAULT_CONFIG_PATH, is_url, load_config, resolve_target
from graylog_client.exceptions import ConfigError, ValidationError
from graylog_client.kvparse import parse_key_values
from graylog_client.levels import LEVEL_ALIASES, LEVELS, FACILITIES
from graylog_client.message import normalize

EXIT_OK = 0
EXIT_SEND_FAILED = 1
EXIT_CONFIG = 2

# 级别名称、别名及数值 0-7
LEVEL_CHOICES = list(LEVELS) + sorted(LEVEL_ALIASES) + [str(i) for i in range(len(LEVELS))]


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--level", "-l", type=click.Choice(LEVEL_CHOICES), help="Syslog severity name or number 0-7")
@click.option("--facility", "-f", type=click.Choice(list(FACILITIES)), help="Syslog facility")
@click.option("--logger", "logger_name", help="Logger name to record")
@click.option("--server", "-s", help="Host to report as the message source")
@click.option("--target", "-t", envvar="GRAYLOG_TARGET", help="Target name from config, or a URL")
@click.option("--message", "-m", required=True, help="Short message")
@click.option("--long", "long_message", help="Full message text")
@click.option("--config", "-c", envvar="GRAYLOG_CONFIG", default=DEFAULT_CONFIG_PATH, help="Config file path")
@click.argument("pairs", nargs=-1)
@click.version_option(version=__version__)
def cli(verbose, level, facility, logger_name, server, target, message, long_message, config, pairs):
    """Send a message to a Graylog server.

    Trailing PAIRS are free text of the form key:value or key=value;
    values may be quoted.
    """
    setup_logging(verbose)
    logger = logging.getLogger("graylog")

    try:
        cfg = None if is_url(target) else load_config(config)
        url = resolve_target(target, cfg)
    except ConfigError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(EXIT_CONFIG)

    fields = parse_key_values(" ".join(pairs))
    options = {
        "level": int(level) if level and level.isdigit() else level,
        "facility": facility,
        "logger": logger_name,
        "server": server,
        "full_message": long_message,
        "message": message,
    }
    fields.update({k: v for k, v in options.items() if v is not None})

    try:
        event = normalize(fields)
    except ValidationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(EXIT_SEND_FAILED)

    logger.debug(f"Sending to {url}: {event}")
    ok, status = send_event(event, url)
    if verbose:
        click.echo(f"{'sent' if ok else 'failed'}: {url} ({status})")
    if not ok:
        click.echo(f"Error: send to {url} failed with status {status}", err=True)
        sys.exit(EXIT_SEND_FAILED)
    sys.exit(EXIT_OK)


def main():
    """CLI 入口函数。"""
    cli()


if __name__ == "__main__":
    main()
