"""CLI commands: objkit selector / objkit combine -- build CSS selectors."""

from __future__ import annotations

import click

from objkit.selector import css_selector_builder


@click.command()
@click.option("--element", "element", default=None, help="Element name, e.g. div")
@click.option("--id", "id_", default=None, help="Element id, without '#'")
@click.option("--class", "classes", multiple=True, help="Class name, repeatable")
@click.option("--attr", "attrs", multiple=True, help="Attribute test, repeatable")
@click.option(
    "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, repeatable"
)
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element")
def selector(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector and print it.

    Parts are applied in order: element, id, classes, attributes,
    pseudo-classes, pseudo-element.
    """
    builder = css_selector_builder
    if element is not None:
        builder = builder.element(element)
    if id_ is not None:
        builder = builder.id(id_)
    for name in classes:
        builder = builder.class_(name)
    for test in attrs:
        builder = builder.attr(test)
    for name in pseudo_classes:
        builder = builder.pseudo_class(name)
    if pseudo_element is not None:
        builder = builder.pseudo_element(pseudo_element)

    click.echo(builder.stringify())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two element selectors with COMBINATOR (" ", "+", "~" or ">")."""
    combined = css_selector_builder.combine(
        css_selector_builder.element(left),
        combinator,
        css_selector_builder.element(right),
    )
    click.echo(combined.stringify())
