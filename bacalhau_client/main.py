"""Command-line entrypoint for orchestrator node and job operations.

This module resolves endpoint configuration from flags and settings, runs one
client operation and prints its JSON payload.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from bacalhau_client.bootstrap import bootstrap_create_client
from bacalhau_client.config import BacalhauSettings, config_load_settings
from bacalhau_client.domain import BacalhauClientError, JobResult, JobSpecFormat
from bacalhau_client.jobs import BacalhauClient

logger = logging.getLogger(__name__)

_MAIN_COMMAND_HANDLERS: dict[str, Callable[[BacalhauClient, argparse.Namespace], Any]] = {
    "nodes": lambda client, arguments: client.client_list_nodes(),
    "node-info": lambda client, arguments: client.client_get_node_info(arguments.node_id),
    "describe": lambda client, arguments: client.client_describe_job(arguments.job_id),
    "create": lambda client, arguments: client.client_create_job(
        main_read_job_spec_text(arguments.job_file),
        main_resolve_spec_format(arguments.job_file, arguments.spec_format),
    ),
    "stop": lambda client, arguments: client.client_stop_job(arguments.job_id, reason=arguments.reason),
    "history": lambda client, arguments: client.client_get_job_history(arguments.job_id, dict(arguments.params)),
    "executions": lambda client, arguments: client.client_get_job_executions(arguments.job_id),
    "result": lambda client, arguments: client.client_get_job_result(arguments.job_id),
    "alive": lambda client, arguments: client.client_is_alive(),
    "version": lambda client, arguments: client.client_get_bacalhau_version(),
    "agent-node": lambda client, arguments: client.client_get_agent_node_info(),
}


def main(argv: list[str] | None = None) -> None:
    """Run one client command and print its result as JSON.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when the command fails.
    """

    parsed_arguments = main_build_argument_parser().parse_args(argv)

    try:
        settings = config_load_settings()
        logging.basicConfig(level=parsed_arguments.log_level or settings.log_level)
        client = main_create_client(parsed_arguments, settings)
        command_result = _MAIN_COMMAND_HANDLERS[parsed_arguments.command](client, parsed_arguments)
    except (BacalhauClientError, RuntimeError, ValueError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        raise SystemExit(1) from error

    if isinstance(command_result, JobResult):
        command_result = command_result.to_payload()
    print(json.dumps(command_result, indent=2, ensure_ascii=False))


def main_build_argument_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Parser with one subcommand per client operation.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    argument_parser = argparse.ArgumentParser(description="Bacalhau orchestrator client")
    argument_parser.add_argument("--host", dest="host", type=str, help="Orchestrator host (default from settings)")
    argument_parser.add_argument("--port", dest="port", type=int, help="Orchestrator API port (default from settings)")
    argument_parser.add_argument(
        "--secure",
        dest="use_secure",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use HTTPS (`--no-secure` forces HTTP); the access token is only sent over HTTPS",
    )
    argument_parser.add_argument("--token", dest="access_token", type=str, help="Bearer access token")
    argument_parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Logging level (default from settings)",
    )

    subparsers = argument_parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("nodes", help="List orchestrator nodes")
    subparsers.add_parser("node-info", help="Describe one node").add_argument("node_id", type=str)
    subparsers.add_parser("describe", help="Describe one job").add_argument("job_id", type=str)

    create_parser = subparsers.add_parser("create", help="Submit a job specification file (`-` reads stdin)")
    create_parser.add_argument("job_file", type=str)
    create_parser.add_argument(
        "--format",
        dest="spec_format",
        choices=[spec_format.value for spec_format in JobSpecFormat],
        help="Job specification encoding (default inferred from file extension)",
    )

    stop_parser = subparsers.add_parser("stop", help="Stop one job")
    stop_parser.add_argument("job_id", type=str)
    stop_parser.add_argument("--reason", dest="reason", type=str, default="")

    history_parser = subparsers.add_parser("history", help="Show job history")
    history_parser.add_argument("job_id", type=str)
    history_parser.add_argument(
        "--param",
        dest="params",
        action="append",
        default=[],
        type=main_parse_query_param,
        help="History filter as KEY=VALUE, repeatable",
    )

    subparsers.add_parser("executions", help="List job executions").add_argument("job_id", type=str)
    subparsers.add_parser("result", help="Show stdout of the first execution that produced output").add_argument(
        "job_id", type=str
    )
    subparsers.add_parser("alive", help="Check agent liveness")
    subparsers.add_parser("version", help="Show orchestrator version")
    subparsers.add_parser("agent-node", help="Describe the agent node")
    return argument_parser


def main_create_client(parsed_arguments: argparse.Namespace, settings: BacalhauSettings) -> BacalhauClient:
    """Build a client from flags, falling back to settings for unset values.

    Args:
        parsed_arguments: Parsed command-line arguments.
        settings: Validated runtime settings.

    Returns:
        BacalhauClient: Configured client.

    Raises:
        ValueError: Raised when resolved endpoint coordinates are invalid.
    """

    def _resolve(flag_value: Any, settings_value: Any) -> Any:
        return settings_value if flag_value is None else flag_value

    return bootstrap_create_client(
        host=_resolve(parsed_arguments.host, settings.bacalhau_api_host),
        port=_resolve(parsed_arguments.port, settings.bacalhau_api_port),
        use_secure=_resolve(parsed_arguments.use_secure, settings.bacalhau_use_secure),
        access_token=_resolve(parsed_arguments.access_token, settings.bacalhau_access_token),
        request_timeout_seconds=settings.bacalhau_request_timeout_seconds,
    )


def main_parse_query_param(raw_value: str) -> tuple[str, str]:
    """Parse one `KEY=VALUE` history filter argument.

    Args:
        raw_value: Raw argument text.

    Returns:
        tuple[str, str]: Key and value.

    Raises:
        argparse.ArgumentTypeError: Raised when the argument has no `=` or an empty key.
    """

    key, separator, value = raw_value.partition("=")
    if not separator or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw_value!r}")
    return key.strip(), value


def main_read_job_spec_text(job_file: str) -> str:
    if job_file == "-":
        return sys.stdin.read()
    return Path(job_file).read_text(encoding="utf-8")


def main_resolve_spec_format(job_file: str, spec_format: str | None) -> str:
    """Return the declared format, or infer it from the file extension."""

    if spec_format:
        return spec_format
    if Path(job_file).suffix.lower() in {".yaml", ".yml"}:
        return JobSpecFormat.YAML.value
    return JobSpecFormat.JSON.value


if __name__ == "__main__":
    main()
