import asyncio
import logging
import socket
import sys
from typing import Optional

import typer

from .config import PROGRAM_NAME, Settings, log_level
from .destination import parse_destination
from .errors import TcpPingError
from .pinger import TcpPinger
from .version import check_for_update, version_line

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    help="Measure TCP connect latency to a host and port",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

def _show_version(value: bool):
    if not value:
        return
    print(version_line())
    hint = asyncio.run(check_for_update())
    if hint:
        print(hint)
    raise typer.Exit()

def ping(
    destination: str = typer.Argument(..., help="Host or IP, optionally host:port or [ipv6]:port"),
    port: Optional[int] = typer.Option(None, "--port", "-p", min=0, max=65535, help="Port, overrides an embedded one (default 80)"),
    ipv4: bool = typer.Option(False, "--ipv4", "-4", help="Use IPv4 only"),
    ipv6: bool = typer.Option(False, "--ipv6", "-6", help="Use IPv6 only"),
    count: Optional[int] = typer.Option(None, "--count", "-c", min=0, help="Stop after N attempts"),
    precheck: bool = typer.Option(True, "--precheck/--no-precheck", help="Abort early if a quick first connect fails"),
    version: bool = typer.Option(False, "--version", "-v", callback=_show_version, is_eager=True, help="Show version and exit"),
):
    """Repeatedly connect to DESTINATION and report latency."""
    if ipv4 and ipv6:
        raise typer.BadParameter("-4/--ipv4 and -6/--ipv6 are mutually exclusive")

    family = None
    if ipv4:
        family = socket.AF_INET
    elif ipv6:
        family = socket.AF_INET6

    try:
        dest = parse_destination(destination, port=port, forced_family=family)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="DESTINATION")

    pinger = TcpPinger(dest, Settings(fail_fast_precheck=precheck))
    try:
        asyncio.run(pinger.run(count=count))
    except TcpPingError as e:
        print(f"{PROGRAM_NAME}: {e}", file=sys.stderr)
        raise typer.Exit(code=1)

app.command()(ping)

def main():
    """Console entry point; usage errors exit with status 1."""
    logging.basicConfig(level=log_level(), format=LOG_FORMAT, stream=sys.stderr)
    try:
        app(prog_name=PROGRAM_NAME)
    except SystemExit as e:
        # click reports usage errors with status 2
        sys.exit(1 if e.code == 2 else e.code)

if __name__ == "__main__":
    main()
