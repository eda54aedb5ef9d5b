"""Top-level Click group for the falcon-interview CLI."""

import logging

import click

from falcon_interview.playground_cmd.cli import playground


@click.group()
@click.option("--debug", is_flag=True, help="Log interview decisions to stderr")
def main(debug):
    """falcon-interview - multi-step interactive interviews for CLI tools."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


main.add_command(playground)
