"""CLI entry point for PC discovery.

Invoked as:
    pc-discovery [options]
    python -m pc_discovery.cli [options]

Prints a single flow JSON envelope on stdout. Diagnostics (--verbose) go to
stderr.

A discovery attempt cannot be cancelled: on Ctrl-C the interrupt envelope is
printed only after the in-flight receive ends, up to --timeout seconds later.
"""

import sys
import time
from pathlib import Path
from typing import Optional

import click

from .config.loader import apply_overrides, ensure_valid, load_config
from .discovery.probe import DiscoveryProbe
from .discovery.profile import DEFAULT_VNC_PORT, ConnectionProfile
from .reporting.json_reporter import JsonReporter, error_output

EXIT_FOUND = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--timeout", type=float, default=None, help="Seconds to wait for a reply (default: 5). Ctrl-C also waits this long.")
@click.option("--port", type=int, default=None, help="UDP discovery port (default: 9999).")
@click.option("--broadcast", default=None, help="Broadcast address (default: 255.255.255.255).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file.",
)
@click.option("--vnc-port", type=int, default=DEFAULT_VNC_PORT, show_default=True, help="Port of the connection profile.")
@click.option(
    "--save-report",
    "report_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also save a JSON report to this file.",
)
@click.option("--pretty", is_flag=True, help="Pretty print output.")
@click.option("--verbose", is_flag=True, help="Print diagnostics to stderr.")
def main(
    timeout: Optional[float],
    port: Optional[int],
    broadcast: Optional[str],
    config_path: Optional[Path],
    vnc_port: int,
    report_file: Optional[Path],
    pretty: bool,
    verbose: bool,
):
    """Find the PC on the local network by UDP broadcast."""
    reporter = JsonReporter()

    try:
        config = load_config(config_path)
        config = ensure_valid(apply_overrides(
            config,
            timeout=timeout,
            port=port,
            broadcast_address=broadcast,
            verbose=verbose or None,
        ))
        _check_port("--vnc-port", vnc_port)
    except (FileNotFoundError, ValueError) as e:
        click.echo(reporter.to_json_string(error_output(str(e)), pretty=pretty))
        sys.exit(EXIT_CONFIG_ERROR)

    start_time = time.time()

    try:
        with DiscoveryProbe(config) as probe:
            outcome = probe.discover().result()
    except KeyboardInterrupt:
        duration_ms = int((time.time() - start_time) * 1000)
        click.echo(reporter.to_json_string(
            error_output("Discovery interrupted by user", duration_ms=duration_ms),
            pretty=pretty,
        ))
        sys.exit(EXIT_INTERRUPTED)

    duration_ms = int((time.time() - start_time) * 1000)
    profile = None
    if outcome.success:
        profile = ConnectionProfile.from_address(outcome.address, port=vnc_port)

    report = reporter.generate(outcome, port=config.port, duration_ms=duration_ms, profile=profile)

    report_path = None
    if report_file:
        try:
            report_path = str(reporter.save(report, report_file))
        except OSError as e:
            click.echo(f"Warning: Failed to save report: {e}", err=True)

    output = reporter.generate_flow_output(report, report_path)
    click.echo(reporter.to_json_string(output, pretty=pretty))

    if not output["success"]:
        sys.exit(EXIT_FAILED)


def _check_port(option: str, value: int) -> None:
    if not 1 <= value <= 65535:
        raise ValueError(f"{option}: Port must be between 1 and 65535, got {value}.")


if __name__ == "__main__":
    main()
