"""CLI commands: cssbuild build / cssbuild categories."""

from __future__ import annotations

import sys

import click

from cssbuild.builder import SelectorBuilder, Stringifiable, combine
from cssbuild.config import CssBuildConfig
from cssbuild.errors import SelectorError
from cssbuild.model import PartCategory


def _assemble(tokens: tuple[str, ...], config: CssBuildConfig) -> Stringifiable:
    """Fold ``category=value`` / ``combinator=TOKEN`` tokens into a selector.

    Compound selectors separated by combinators are combined left to right.
    """
    result: Stringifiable | None = None
    pending: str | None = None
    current: SelectorBuilder | None = None

    for token in tokens:
        name, sep, value = token.partition(config.part_separator)
        if not sep:
            raise click.UsageError(
                f"Expected CATEGORY{config.part_separator}VALUE, got {token!r}"
            )
        if name == config.combinator_prefix:
            if current is None:
                raise click.UsageError(f"Combinator {value!r} has no left operand")
            result = current if result is None else combine(result, pending, current)
            pending = value
            current = None
            continue
        if current is None:
            current = SelectorBuilder()
        current.append(PartCategory.from_name(name), value)

    if current is None:
        if pending is not None:
            raise click.UsageError(f"Combinator {pending!r} has no right operand")
        raise click.UsageError("No selector parts given")
    if result is None:
        return current
    return combine(result, pending, current)


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def build(config: CssBuildConfig | None, tokens: tuple[str, ...]) -> None:
    """Build a selector from CATEGORY=VALUE tokens.

    Categories: element, id, class, attr, pseudo-class, pseudo-element.
    A combinator=TOKEN token joins the parts before it with the parts after
    it, e.g. ``element=ul combinator='>' element=li``.
    """
    config = config or CssBuildConfig()
    try:
        selector = _assemble(tokens, config)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())


@click.command()
def categories() -> None:
    """List selector part categories in their required order."""
    for category in PartCategory:
        once = " (once)" if category.single_shot else ""
        click.echo(f"{category.value}. {category.name.lower()}: {category.format('value')}{once}")
