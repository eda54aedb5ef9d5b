"""Click command that runs the sample interview."""

import os

import click

from falcon_interview.display import answers_to_rows, echo_key_value_table
from falcon_interview.playground_cmd.sample_interview import build_sample_interview


@click.command("playground")
@click.option("--base-directory", default=".", help="Default project directory")
@click.option("--contains", default=".", help="Name that must exist in the project directory")
@click.option(
    "--invert-confirmation",
    is_flag=True,
    help="Treat a 'no' to the final confirmation as 'yes' and vice versa",
)
def playground(base_directory, contains, invert_confirmation):
    """Run a sample interview and print the collected answers."""
    interview = build_sample_interview(
        os.path.abspath(base_directory), contains, invert_confirmation=invert_confirmation,
    )
    final_answers = interview.start()

    if interview.status.aborted:
        click.echo(f"Interview aborted: {interview.status.reason}", err=True)
        raise SystemExit(1)

    click.echo("")
    echo_key_value_table(answers_to_rows(final_answers))
    click.echo("")
    click.echo(f"Status: completed={interview.status.completed} aborted={interview.status.aborted}")
