"""Command-line interface for pycomicget using Click."""

import asyncio
import json
import logging
import sys
from pathlib import Path

import click
from tqdm import tqdm

from pycomicget import __version__
from pycomicget.client.api import Client
from pycomicget.config import Config
from pycomicget.errors import CatalogError
from pycomicget.http.download import DownloadManager, DownloadTask
from pycomicget.utils.file import filename_for_url

# Default to WARNING so logs do not interfere with progress bars;
# --verbose raises it to INFO
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _echo_model(model) -> None:
    click.echo(model.model_dump_json(by_alias=True, indent=2))


def _run(config: Config, operation):
    """Run ``operation(client)`` on a fresh client and exit 1 on catalog errors."""

    async def _main():
        async with Client(config=config) as client:
            return await operation(client)

    try:
        return asyncio.run(_main())
    except CatalogError as e:
        click.echo(f"✗ {type(e).__name__}: {e}", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.option('--version', '-v', is_flag=True, help='Show version and exit')
@click.option('--host', help='API host (default: $PYCOMICGET_API_HOST or built-in)')
@click.option('--proxy', help='HTTP/HTTPS proxy')
@click.option('--timeout', default=30.0, help='Request timeout in seconds')
@click.option('--header-file', help='Path to extra transport header file')
@click.option('--no-progress', is_flag=True, help='Disable progress bars')
@click.option('--verbose', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, version, host, proxy, timeout, header_file, no_progress, verbose):
    """pycomicget - Browse a comic catalog API from the command line."""
    if version:
        click.echo(f"pycomicget version {__version__}")
        ctx.exit()

    if verbose:
        logging.getLogger().setLevel(logging.INFO)
        logging.getLogger('httpx').setLevel(logging.INFO)

    ctx.obj = Config(
        api_host=host or "",
        proxy=proxy,
        timeout=timeout,
        header_file=header_file,
        show_progress=not no_progress,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.pass_obj
def tags(config: Config):
    """Show the tag taxonomy."""
    _echo_model(_run(config, lambda client: client.tags()))


@cli.command()
@click.argument('query')
@click.option('--type', 'q_type', default='', help='Search field: name, author, local (default: all)')
@click.option('--limit', default=20, help='Page size')
@click.option('--offset', default=0, help='Items to skip')
@click.pass_obj
def search(config: Config, query: str, q_type: str, limit: int, offset: int):
    """Search the catalog.

    Example:
        pycomicget search "one punch" --type name
    """
    _echo_model(_run(config, lambda client: client.comic_search(q_type, query, limit, offset)))


@cli.command()
@click.option('--date', 'date_type', default='day',
              type=click.Choice(['day', 'week', 'month', 'total']), help='Ranking window')
@click.option('--limit', default=20, help='Page size')
@click.option('--offset', default=0, help='Items to skip')
@click.pass_obj
def rank(config: Config, date_type: str, limit: int, offset: int):
    """Show the ranking list."""
    _echo_model(_run(config, lambda client: client.comic_rank(date_type, offset, limit)))


@cli.command()
@click.argument('path_word')
@click.pass_obj
def comic(config: Config, path_word: str):
    """Show the detail record of an item."""
    _echo_model(_run(config, lambda client: client.comic(path_word)))


@cli.command()
@click.argument('path_word')
@click.pass_obj
def query(config: Config, path_word: str):
    """Show availability and reading state of an item."""
    _echo_model(_run(config, lambda client: client.comic_query(path_word)))


@cli.command()
@click.argument('path_word')
@click.option('--group', default='default', help='Chapter group path word')
@click.option('--limit', default=100, help='Page size')
@click.option('--offset', default=0, help='Items to skip')
@click.option('--all', 'fetch_all', is_flag=True, help='Page through every chapter')
@click.pass_obj
def chapters(config: Config, path_word: str, group: str, limit: int, offset: int, fetch_all: bool):
    """List chapters of an item.

    Example:
        pycomicget chapters onepunchman --all
    """
    if not fetch_all:
        _echo_model(_run(config, lambda client: client.comic_chapter(path_word, group, limit, offset)))
        return

    async def _all_chapters(client: Client):
        collected = []
        page = await client.comic_chapter(path_word, group, limit, offset)
        with tqdm(total=page.total, desc="Chapters", unit="ch", disable=not config.show_progress) as pbar:
            while True:
                collected.extend(page.items)
                pbar.update(len(page.items))
                if not page.items or not page.has_more:
                    break
                page = await client.comic_chapter(
                    path_word, group, limit, page.offset + len(page.items)
                )
        return collected

    collected = _run(config, _all_chapters)
    click.echo(json.dumps(
        [chapter.model_dump(by_alias=True) for chapter in collected],
        ensure_ascii=False,
        indent=2,
    ))


@cli.command()
@click.argument('urls', nargs=-1, required=True)
@click.option('--output', '-o', default='./downloads', help='Output directory')
@click.option('--concurrent', '-c', default=8, help='Max concurrent downloads')
@click.option('--max-retries', default=3, help='Maximum retry attempts')
@click.pass_obj
def fetch(config: Config, urls, output: str, concurrent: int, max_retries: int):
    """Download raw files (covers, images) from absolute URLs."""
    config.download_dir = output
    config.max_concurrent_downloads = concurrent
    config.max_retries = max_retries

    out_dir = Path(output)
    tasks = [
        DownloadTask(url=url, save_path=out_dir / filename_for_url(url, idx))
        for idx, url in enumerate(urls, start=1)
    ]

    async def _download(client: Client) -> int:
        manager = DownloadManager(client, config)
        manager.add_tasks(tasks)
        return await manager.execute()

    successful = _run(config, _download)
    click.echo(f"\nComplete: {successful} successful, {len(tasks) - successful} failed")
    if successful < len(tasks):
        sys.exit(1)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
