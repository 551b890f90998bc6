import click

from backoffice_auth.cli.providers import providers


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """backoffice-auth CLI"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(providers)


if __name__ == "__main__":
    cli()
