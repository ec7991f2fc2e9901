"""CLI commands: objkit area / objkit decode."""

from __future__ import annotations

import json
import sys

import click

from objkit.codec import CodecError, from_json_text, to_json_text
from objkit.config import ObjkitConfig
from objkit.model import make_rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    result = make_rectangle(width, height).get_area()
    click.echo(f"{result:g}")


@click.command()
@click.argument("tag")
@click.argument("json_text")
@click.pass_obj
def decode(config: ObjkitConfig | None, tag: str, json_text: str) -> None:
    """Rebuild the type registered as TAG from JSON_TEXT.

    Prints the object's repr followed by its re-encoded JSON.
    """
    try:
        obj = from_json_text(tag, json_text)
    except (CodecError, json.JSONDecodeError) as exc:
        click.echo(f"Decode error: {exc}", err=True)
        sys.exit(1)

    click.echo(repr(obj))
    click.echo(to_json_text(obj, config=config))
