"""Click commands that print generated names, for use from shell scripts."""

import click

from prflow.slug import DEFAULT_FALLBACK, SHORT_NAME_MAX_WORDS, generate_branch_name, short_name


@click.group("name")
def name_group():
    """Generate branch and directory names from a description."""


@name_group.command("branch")
@click.argument("text", nargs=-1)
@click.option("--fallback", default=DEFAULT_FALLBACK, show_default=True,
              help="Word used when the description has no meaningful words.")
def branch_name_cmd(text, fallback):
    """Print a timestamped branch name, e.g. 2026jan12-16-43-fix-auth-bug."""
    try:
        name = generate_branch_name(" ".join(text), fallback=fallback)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--fallback")
    click.echo(name)


@name_group.command("short")
@click.argument("text", nargs=-1)
@click.option("--max-words", default=SHORT_NAME_MAX_WORDS, show_default=True,
              type=click.IntRange(min=0), help="Maximum number of words kept.")
def short_name_cmd(text, max_words):
    """Print the first meaningful words of TEXT joined with '-' (may be empty)."""
    click.echo(short_name(" ".join(text), max_words=max_words))
