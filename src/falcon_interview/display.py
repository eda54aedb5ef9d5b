"""Key/value tables for showing collected answers on the console."""

import click

from falcon_interview.templates.template_renderer import render_template

OPTION_HEADER = "OPTION"
VALUE_HEADER = "VALUE"


def _normalize_rows(rows):
    normalized = []
    for row in rows:
        if isinstance(row, dict):
            option, value = row.get("option", ""), row.get("value", "")
        else:
            option, value = row
        normalized.append((str(option), "" if value is None else str(value)))
    return normalized


def render_key_value_table(rows) -> str:
    """Render rows as a two-column OPTION / VALUE table.

    Args:
        rows: Mappings with ``option`` and ``value`` keys, or 2-tuples.

    Returns:
        The table text without a trailing newline.
    """
    normalized = _normalize_rows(rows)
    option_width = max([len(OPTION_HEADER)] + [len(o) for o, _ in normalized])
    value_width = max([len(VALUE_HEADER)] + [len(v) for _, v in normalized])
    table = render_template(
        "key_value_table.j2",
        rows=normalized,
        option_header=OPTION_HEADER,
        value_header=VALUE_HEADER,
        option_width=option_width,
        value_width=value_width,
        rule="─",
    )
    return table.rstrip("\n")


def echo_key_value_table(rows, output=None):
    click.echo(render_key_value_table(rows), file=output)


def answers_to_rows(answers) -> list:
    """Turn an answers mapping into table rows, one per key."""
    return [{"option": key, "value": value} for key, value in answers.items()]


def show_answers(display, answers, output=None, header=None):
    """Run a display callback and render the rows it returns, if any.

    A callback that renders on its own returns None and nothing else is
    printed. When it returns rows, ``header`` (or a blank line) precedes the
    table and a blank line follows it.
    """
    if display is None:
        return
    rows = display(answers)
    if not isinstance(rows, list):
        return
    click.echo(header or "", file=output)
    echo_key_value_table(rows, output)
    click.echo("", file=output)
