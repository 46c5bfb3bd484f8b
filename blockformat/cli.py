"""CLI — click-based command-line interface."""

from __future__ import annotations

import asyncio
import base64
import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import click

from blockformat.codecs.base import BlockCodec
from blockformat.codecs.registry import codec_code, list_registered_codecs, load_codecs
from blockformat.config import BlockFormatConfig, apply_config, load_config
from blockformat.convert import convert
from blockformat.errors import BlockFormatError
from blockformat.models import Format


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(),
              help="Config file to use instead of .blockformat.yml lookup.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """blockformat — inspect blocks through a converted codec."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    cfg = load_config(start_dir=str(Path.cwd()), config_path=config_path)
    try:
        apply_config(cfg)
    except ValueError as exc:
        _fail(exc)
    ctx.obj = cfg


def _fail(exc: Exception) -> NoReturn:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


def _format_for(codec_spec: str, cfg: BlockFormatConfig, hash_alg: str | None = None) -> Format:
    try:
        codec: BlockCodec = load_codecs(codec_spec)[0]
        return convert(codec, default_hash_alg=hash_alg, config=cfg)
    except (BlockFormatError, ValueError, TypeError, ImportError) as exc:
        _fail(exc)


def _jsonable(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return {"/": {"bytes": base64.b64encode(bytes(value)).decode("ascii")}}
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return {"/": str(value)}


codec_option = click.option("--codec", "codec_spec", default="json", show_default=True,
                            help="<name> | import:pkg.module:obj")


# ───────────────────────────────────────────────────────────────────
# codecs
# ───────────────────────────────────────────────────────────────────

@main.group()
def codecs() -> None:
    """Inspect available codecs."""


@codecs.command("list")
def codecs_list() -> None:
    """List registered codecs."""
    click.echo(f"{'Name':<20} {'Code'}")
    click.echo("-" * 30)
    for c in sorted(list_registered_codecs(), key=lambda c: c.name):
        try:
            code = hex(codec_code(c.name))
        except BlockFormatError:
            code = "unregistered"
        click.echo(f"{c.name:<20} {code}")


# ───────────────────────────────────────────────────────────────────
# cid / resolve / tree
# ───────────────────────────────────────────────────────────────────

@main.command()
@click.argument("file", type=click.File("rb"))
@codec_option
@click.option("--hash-alg", "hash_alg", default=None,
              help="Multihash name (default from config, else sha2-256).")
@click.option("--cid-version", "cid_version", default=None, type=click.Choice(["0", "1"]),
              help="CID version (default from config, else 1).")
@click.pass_obj
def cid(cfg: BlockFormatConfig, file: Any, codec_spec: str, hash_alg: str | None,
        cid_version: str | None) -> None:
    """Print the CID of the block in FILE."""
    fmt = _format_for(codec_spec, cfg, hash_alg)
    data = file.read()
    version = int(cid_version) if cid_version is not None else None
    try:
        result = asyncio.run(fmt.cid(data, version=version))
    except (BlockFormatError, ValueError) as exc:
        _fail(exc)
    click.echo(str(result))


@main.command()
@click.argument("file", type=click.File("rb"))
@click.argument("path", default="")
@codec_option
@click.pass_obj
def resolve(cfg: BlockFormatConfig, file: Any, path: str, codec_spec: str) -> None:
    """Resolve PATH inside the block in FILE."""
    fmt = _format_for(codec_spec, cfg)
    try:
        result = fmt.resolve(file.read(), path)
    except (BlockFormatError, ValueError) as exc:
        _fail(exc)
    click.echo(json.dumps({
        "value": _jsonable(result.value),
        "remainderPath": result.remainder_path,
    }, indent=2))


@main.command()
@click.argument("file", type=click.File("rb"))
@codec_option
@click.pass_obj
def tree(cfg: BlockFormatConfig, file: Any, codec_spec: str) -> None:
    """List every path inside the block in FILE."""
    fmt = _format_for(codec_spec, cfg)
    try:
        paths = list(fmt.tree(file.read()))
    except (BlockFormatError, ValueError) as exc:
        _fail(exc)
    for p in paths:
        click.echo(p)
