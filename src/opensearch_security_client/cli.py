import asyncio
import json
from functools import wraps

import click
import httpx
import yaml

from opensearch_security_client.client import SecurityClient
from opensearch_security_client.response import Response


def run_async(coro):
    """Helper to run async functions synchronously in Click commands."""
    return asyncio.run(coro)


def build_client(connection: dict) -> SecurityClient:
    username = connection.get("username")
    auth = (username, connection.get("password") or "") if username else None
    return SecurityClient(
        connection.get("url"),
        auth=auth,
        verify=False if connection.get("insecure") else None,
        timeout=connection.get("timeout"),
    )


async def execute(connection: dict, call) -> Response:
    async with build_client(connection) as client:
        return await call(client)


def load_body(path: str):
    """Read a request body from a JSON or YAML file."""
    with open(path, "r") as file:
        try:
            if path.endswith(".json"):
                return json.load(file)
            return yaml.safe_load(file)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise click.BadParameter(f"{path}: {e}", param_hint="'--file'")


def echo_response(response: Response):
    reason = httpx.codes.get_reason_phrase(response.status_code)
    color = "red" if response.is_error() else "green"
    click.echo(f"[{click.style(str(response.status_code), fg=color)} {reason}]")
    if response.body:
        click.echo(response.text)
    for warning in response.warnings():
        click.echo(f"{click.style('warning', fg='yellow')}: {warning}", err=True)
    if response.is_error():
        raise SystemExit(1)


def handle_api_exceptions(func):
  @wraps(func)
  def wrapper(*args, **kwargs):
    try:
      return func(*args, **kwargs)
    except httpx.ConnectError as e:
      click.echo(f"Connection could not be established: {click.style(str(e), fg='red')}", err=True)
      raise SystemExit(1)
    except (httpx.TimeoutException, asyncio.TimeoutError):
      click.echo(f"[{click.style('timeout', fg='red')}] The request did not complete in time", err=True)
      raise SystemExit(1)
    except httpx.TransportError as e:
      click.echo(f"Request failed: {click.style(str(e), fg='red')}", err=True)
      raise SystemExit(1)

  return wrapper


def request_options(func):
  """Options shared by every role mapping command."""
  func = click.option("--pretty", is_flag=True, help="Pretty-print the response body")(func)
  func = click.option("--human", is_flag=True, help="Human-readable statistical values")(func)
  func = click.option("--error-trace", is_flag=True, help="Include stack traces for errors")(func)
  func = click.option("--filter-path", multiple=True, help="Filter response properties (repeatable)")(func)
  func = click.option("--opaque-id", default=None, help="Value for the X-Opaque-Id header")(func)
  func = click.option("--header", "-H", "header", type=(str, str), multiple=True, help="Extra request header")(func)
  return func


def to_options(pretty, human, error_trace, filter_path, opaque_id, header) -> dict:
  return {
    "pretty": pretty,
    "human": human,
    "error_trace": error_trace,
    "filter_path": list(filter_path),
    "opaque_id": opaque_id,
    "headers": list(header) or None,
  }


@click.command()
@click.argument("name", required=False, default="")
@request_options
@click.pass_context
@handle_api_exceptions
def get_role_mapping(ctx, name, **kwargs):
  """Get a role mapping, or all of them when NAME is omitted."""
  options = to_options(**kwargs)
  response = run_async(execute(ctx.obj["CONNECTION"], lambda client: client.role_mappings.get(name, **options)))
  echo_response(response)


@click.command()
@click.argument("name")
@click.option("--file", "-f", "path", type=click.Path(exists=True, dir_okay=False), required=True)
@request_options
@click.pass_context
@handle_api_exceptions
def create_role_mapping(ctx, name, path, **kwargs):
  """Create or replace the role mapping NAME."""
  options = to_options(**kwargs)
  body = load_body(path)
  response = run_async(execute(ctx.obj["CONNECTION"], lambda client: client.role_mappings.create(name, body, **options)))
  echo_response(response)


@click.command()
@click.argument("name")
@click.option("--file", "-f", "path", type=click.Path(exists=True, dir_okay=False), required=True)
@request_options
@click.pass_context
@handle_api_exceptions
def patch_role_mapping(ctx, name, path, **kwargs):
  """Apply JSON patch operations to the role mapping NAME."""
  options = to_options(**kwargs)
  body = load_body(path)
  response = run_async(execute(ctx.obj["CONNECTION"], lambda client: client.role_mappings.patch(name, body, **options)))
  echo_response(response)


@click.command()
@click.option("--file", "-f", "path", type=click.Path(exists=True, dir_okay=False), required=True)
@request_options
@click.pass_context
@handle_api_exceptions
def bulk_upsert_role_mappings(ctx, path, **kwargs):
  """Apply JSON patch operations to several role mappings."""
  options = to_options(**kwargs)
  body = load_body(path)
  response = run_async(execute(ctx.obj["CONNECTION"], lambda client: client.role_mappings.bulk_upsert(body, **options)))
  echo_response(response)


@click.group()
@click.option("--url", envvar="OPENSEARCH_URL", default=None, help="Cluster URL")
@click.option("--username", "-u", envvar="OPENSEARCH_USERNAME", default=None)
@click.option("--password", "-p", envvar="OPENSEARCH_PASSWORD", default=None)
@click.option("--insecure", "-k", is_flag=True, envvar="OPENSEARCH_INSECURE", help="Skip TLS certificate verification")
@click.option("--timeout", type=float, envvar="OPENSEARCH_TIMEOUT", default=None, help="Request timeout in seconds")
@click.pass_context
def cli(ctx, url, username, password, insecure, timeout):
    """Manage OpenSearch security role mappings."""
    ctx.ensure_object(dict)
    ctx.obj["CONNECTION"] = {
        "url": url,
        "username": username,
        "password": password,
        "insecure": insecure,
        "timeout": timeout,
    }

cli.add_command(get_role_mapping, "get")
cli.add_command(create_role_mapping, "create")
cli.add_command(patch_role_mapping, "patch")
cli.add_command(bulk_upsert_role_mappings, "bulk-upsert")

if __name__ == '__main__':
    cli()
