from pathlib import Path
from typing import Any

import click

from backoffice_auth.auth.back_office import BackOfficeProviderOptions
from backoffice_auth.auth.login_providers import get_auto_login_provider, has_deny_local_login
from backoffice_auth.auth.reserved_paths import ReservedPathRegistry
from backoffice_auth.cli.utils import configure_logging_from_config, output_error, output_result
from backoffice_auth.config.loader import load_auth_config
from backoffice_auth.config.registration import register_providers


def _provider_summary(provider: BackOfficeProviderOptions) -> dict[str, Any]:
    settings = provider.settings
    return {
        "authentication_type": settings.authentication_type,
        "caption": settings.caption,
        "style": settings.style,
        "icon": settings.icon,
        "callback_path": settings.callback_path,
        "deny_local_login": settings.deny_local_login,
        "auto_login_redirect": settings.auto_login_redirect,
        "auto_link": settings.auto_link_options is not None,
    }


def _format_summary(
    providers: list[dict[str, Any]], local_login: bool, auto_redirect: str | None
) -> str:
    output = []

    if not providers:
        output.append(click.style("ℹ️  No external login providers configured", fg="blue"))
        return "\n".join(output)

    output.append(f"\n{click.style('🔑 Back-office login providers', fg='cyan', bold=True)}")
    for provider in providers:
        output.append(f"  {click.style('•', fg='green')} {provider['authentication_type']}")
        if provider["caption"]:
            output.append(f"    Caption: {provider['caption']}")
        output.append(f"    Callback: {provider['callback_path'] or '-'}")
        flags = [
            name
            for name in ("deny_local_login", "auto_login_redirect", "auto_link")
            if provider[name]
        ]
        if flags:
            output.append(f"    Flags: {', '.join(flags)}")

    login_state = (
        click.style("enabled", fg="green") if local_login else click.style("disabled", fg="red")
    )
    output.append(f"\nLocal login: {login_state}")
    if auto_redirect:
        output.append(f"Auto redirect: {click.style(auto_redirect, fg='yellow')}")

    return "\n".join(output)


@click.command(name="providers")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the provider config file",
)
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def providers(config_path: Path | None, json_output: bool, debug: bool) -> None:
    """List the configured back-office login providers.

    Registers every provider from the config file and shows the resulting
    authentication types, reserved callback paths and login screen behaviour.

    \b
    Examples:
        backoffice-auth providers
        backoffice-auth providers --config ./backoffice-auth.yml --json-output
    """
    try:
        config = load_auth_config(config_path)
        configure_logging_from_config(config.logging, debug=debug)

        registered = register_providers(config, reserved_paths=ReservedPathRegistry())
        descriptions = [p.description for p in registered]
        summaries = [_provider_summary(p) for p in registered]
        local_login = not has_deny_local_login(descriptions)
        auto_redirect = get_auto_login_provider(descriptions)

        if json_output:
            output_result(
                {
                    "providers": summaries,
                    "local_login_enabled": local_login,
                    "auto_login_provider": auto_redirect,
                },
                json_output,
            )
        else:
            click.echo(_format_summary(summaries, local_login, auto_redirect))

    except (FileNotFoundError, ValueError) as e:
        output_error(e, json_output, debug)
