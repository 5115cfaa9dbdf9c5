from textwrap import dedent
import inspect
import json
import sys
import re
import traceback
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Tuple, Union, get_args, get_origin

import click
import requests
from loguru import logger
from pydantic import BaseModel, ValidationError

from .mailchimp_api import MailchimpAPI
from .errors import MailchimpError
from .resources import Page, Resource

# Parameters handled by the group instead of each command
GLOBAL_PARAMS = {"self", "timeout"}


# --- Serialization Helper ---
def serialize_output(data: Any) -> Any:
    """
    Recursively serialize data for JSON output, handling Pydantic models,
    resource handles, pages, lists, and dicts.
    """
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    elif isinstance(data, Page):
        return serialize_output(data.data)
    elif isinstance(data, Resource):
        identifiers = {
            k: v for k, v in vars(data).items() if k not in ("api", "data")
        }
        identifiers["data"] = serialize_output(data.data)
        return identifiers
    elif isinstance(data, list):
        return [serialize_output(item) for item in data]
    elif isinstance(data, dict):
        return {k: serialize_output(v) for k, v in data.items()}
    # Basic types (str, int, float, bool, None) are returned as is.
    return data


def configure_logger(debug: bool) -> None:
    """Send loguru output to stderr, detailed when debugging."""
    logger.remove()
    if debug:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        )
    else:
        logger.add(sys.stderr, level="INFO")


# --- Click CLI Setup ---


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--api-key",
    envvar="MAILCHIMP_PYTHON_API_KEY",
    help="Mailchimp API key, '<key>-<datacenter>' (uses env var if not provided).",
    required=False,
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    envvar="MAILCHIMP_PYTHON_API_DEBUG",
    help="Log every request and response.",
)
@click.option(
    "--timeout",
    type=click.FLOAT,
    default=None,
    envvar="MAILCHIMP_PYTHON_API_TIMEOUT",
    help="Per-call timeout in seconds.",
)
@click.option(
    "--ascii",
    "ensure_ascii",
    is_flag=True,
    default=False,
    help="Escape non-ASCII characters in the JSON output (default: keep Unicode).",
)
@click.pass_context
def cli(ctx, api_key, debug, timeout, ensure_ascii):
    """
    Mailchimp Python API Command Line Interface.

    Commands are generated from the MailchimpAPI methods.
    Requires MAILCHIMP_PYTHON_API_KEY environment variable or --api-key option.
    Model arguments (bodies and query params) are given as JSON strings.
    """
    ctx.ensure_object(dict)

    if not api_key:
        raise click.UsageError(
            "API Key is required. Provide --api-key option or set MAILCHIMP_PYTHON_API_KEY environment variable."
        )

    configure_logger(debug)

    ctx.obj["API_KEY"] = api_key
    ctx.obj["DEBUG"] = debug
    ctx.obj["TIMEOUT"] = timeout
    ctx.obj["ENSURE_ASCII"] = ensure_ascii


def unwrap_optional(annotation: Any) -> Tuple[Any, bool]:
    """Return (inner type, is_optional) for Optional[T], else (annotation, False)."""
    if get_origin(annotation) is Union:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0], True
    return annotation, False


def is_model(annotation: Any) -> bool:
    return inspect.isclass(annotation) and issubclass(annotation, BaseModel)


def parse_docstring_args(docstring: str) -> Dict[str, str]:
    """Extract 'name: description' pairs from the Args section of a docstring."""
    param_descriptions: Dict[str, str] = {}
    in_args_section = False
    param_name = None
    for line in docstring.split("\n"):
        stripped_line = line.strip()
        if stripped_line == "Args:":
            in_args_section = True
        elif stripped_line in ("Returns:", "Raises:"):
            in_args_section = False
        elif in_args_section and stripped_line:
            match = re.match(r"^\s+([a-zA-Z_][a-zA-Z0-9_]*):\s+(.*)$", line)
            if match:
                param_name = match.group(1)
                param_descriptions[param_name] = match.group(2).strip()
            elif param_name is not None:
                param_descriptions[param_name] += " " + stripped_line
    return param_descriptions


def create_click_command(
    api_method_name: str, api_method: Callable
) -> Optional[click.Command]:
    """
    Create a Click command for a MailchimpAPI method, inspecting its
    signature for arguments. Returns None if creation fails.
    """
    try:
        sig = inspect.signature(api_method)
        params = [p for p in sig.parameters.values() if p.name not in GLOBAL_PARAMS]
    except (ValueError, TypeError) as e:
        logger.warning(f"Could not get signature for method '{api_method_name}': {e}")
        return None

    # Parameters whose value arrives as a JSON string and becomes a model
    model_params: Dict[str, Any] = {}
    for param in params:
        inner, _ = unwrap_optional(param.annotation)
        if is_model(inner):
            model_params[param.name] = inner

    @click.pass_context
    def command_func(ctx, **kwargs):
        debug = ctx.obj["DEBUG"]
        call_args = {k: v for k, v in kwargs.items() if v is not None}

        # --- JSON Parsing for Model Parameters ---
        for param_name, model in model_params.items():
            if param_name in call_args:
                try:
                    call_args[param_name] = model.model_validate_json(
                        call_args[param_name]
                    )
                except ValidationError as json_err:
                    click.echo(
                        f"Error: Invalid JSON provided for parameter '{param_name.replace('_', '-')}': {json_err}",
                        err=True,
                    )
                    ctx.exit(1)

        try:
            api = MailchimpAPI(
                api_key=ctx.obj["API_KEY"],
                debug=debug,
                timeout=ctx.obj["TIMEOUT"],
            )
            logger.debug(f"Calling API method '{api_method_name}' with args: {call_args}")
            result = getattr(api, api_method_name)(**call_args)
        except (MailchimpError, ValueError, requests.exceptions.RequestException) as e:
            logger.error(f"Error: {e}")
            if debug:
                logger.debug(traceback.format_exc())
            sys.exit(1)

        if result is not None:
            click.echo(
                json.dumps(
                    serialize_output(result),
                    indent=2,
                    ensure_ascii=ctx.obj["ENSURE_ASCII"],
                )
            )

    command_func.__name__ = api_method_name

    docstring = dedent(api_method.__doc__ or f"Execute the {api_method_name} API operation.")
    help_text = " ".join(docstring.strip().split("\n\n")[0].splitlines()).strip()
    param_descriptions = parse_docstring_args(docstring)

    # --- Add Click options based on the method signature ---
    click_params = []
    for param in params:
        param_name_cli = param.name.replace("_", "-")
        inner, is_optional = unwrap_optional(param.annotation)
        is_required = param.default is inspect.Parameter.empty and not is_optional
        default_value = None if param.default is inspect.Parameter.empty else param.default

        is_flag = False
        click_type: Any = click.STRING
        if inner is int:
            click_type = click.INT
        elif inner is float:
            click_type = click.FLOAT
        elif inner is bool:
            click_type = click.BOOL
            is_flag = default_value is False
        elif inner is datetime:
            click_type = click.DateTime(
                formats=["%Y-%m-%dT%H:%M:%S%z", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M"]
            )

        param_help = param_descriptions.get(param.name, f"Parameter '{param.name}'.")
        if param.name in model_params:
            param_help += " (Provide as JSON string)"

        click_params.append(
            click.Option(
                [f"--{param_name_cli}"],
                type=click_type,
                required=is_required,
                default=default_value,
                help=param_help,
                is_flag=is_flag,
                show_default=not is_flag and default_value is not None,
            )
        )

    try:
        return click.Command(
            name=api_method_name.replace("_", "-"),
            callback=command_func,
            params=click_params,
            help=docstring,
            short_help=help_text,
        )
    except Exception as e:
        logger.warning(f"Failed to create click command for '{api_method_name}': {e}")
        return None


# --- Add Commands to CLI Group ---
def add_commands_to_cli(cli_group: click.Group) -> None:
    """
    Inspect the MailchimpAPI class statically and add every public method
    as a Click command. Does NOT require an API key.
    """
    for name, member in inspect.getmembers(MailchimpAPI):
        if name.startswith("_") or not inspect.isfunction(member):
            continue
        command = create_click_command(name, member)
        if command:
            cli_group.add_command(command)
        else:
            logger.warning(f"Skipped command generation for method: {name}")


add_commands_to_cli(cli)

# Main entry point for the script
if __name__ == "__main__":
    cli(obj={})
