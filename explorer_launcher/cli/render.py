"""Render the explorer frontend launch descriptor without launching anything."""

from __future__ import annotations

import json as jsonlib
import sys

import click
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..domain.exceptions import LauncherError
from ..domain.models import LaunchDescriptor
from ..domain.services import DEFAULT_IMAGE, DEFAULT_NETWORK_NAME, FrontendDescriptorBuilder
from ..domain.value_objects import BackendAddresses, ServiceUrl


def render_descriptor(descriptor: LaunchDescriptor, console: Console) -> None:
    """Print the descriptor as rich tables."""
    console.print(f"[bold cyan]Image:[/bold cyan] {escape(descriptor.image)}")

    ports = Table(title="Ports", box=box.SIMPLE)
    ports.add_column("Port ID", no_wrap=True)
    ports.add_column("Used")
    ports.add_column("Public")
    for port_id in sorted(descriptor.used_ports.keys() | descriptor.public_ports.keys()):
        used = descriptor.used_ports.get(port_id)
        public = descriptor.public_ports.get(port_id)
        ports.add_row(port_id, str(used) if used else "-", str(public) if public else "-")
    console.print(ports)

    env = Table(title="Environment", box=box.SIMPLE)
    env.add_column("Variable", style="cyan", no_wrap=True)
    env.add_column("Value")
    for key in sorted(descriptor.env_vars):
        env.add_row(escape(key), escape(descriptor.env_vars[key]))
    console.print(env)


@click.command()
@click.option(
    "--backend-private-url",
    required=True,
    help="Backend URL inside the enclave, e.g. ws://10.0.0.5:8080/ws",
)
@click.option(
    "--backend-public-url",
    required=True,
    help="Backend URL outside the enclave, e.g. ws://203.0.113.9:443/ws",
)
@click.option("--backend-ip", default=None, help="Host browsers use to reach the backend")
@click.option("--image", default=DEFAULT_IMAGE, show_default=True, help="Frontend image")
@click.option(
    "--network-name", default=DEFAULT_NETWORK_NAME, show_default=True, help="Network name"
)
@click.option("--json", is_flag=True, help="Output the descriptor as JSON")
def main(
    backend_private_url: str,
    backend_public_url: str,
    backend_ip: str | None,
    image: str,
    network_name: str,
    json: bool,
):
    """Show the launch descriptor of the explorer frontend."""
    console = Console()

    try:
        backend = BackendAddresses(
            private_url=ServiceUrl.parse(backend_private_url),
            public_url=ServiceUrl.parse(backend_public_url),
        )
        builder = FrontendDescriptorBuilder(image=image, network_name=network_name)
        descriptor = builder.build(backend, backend_ip)
    except (LauncherError, ValueError) as e:
        console.print(f"[red bold]Error:[/red bold] {escape(str(e))}")
        sys.exit(1)

    if json:
        click.echo(jsonlib.dumps(descriptor.model_dump(mode="json"), indent=2))
    else:
        render_descriptor(descriptor, console)

    sys.exit(0)


if __name__ == "__main__":
    main()
