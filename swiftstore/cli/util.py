"""
Common utilities for the CLI.
"""

import sys
import traceback
from typing import Optional

import click
from loguru import logger
from rich.console import Console

from swiftstore.api.api_resource import ClientError, ServerError
from swiftstore.api.client import APIClient
from swiftstore.api.utils import StorageError

console = Console(highlight=False)


def click_group(*args, **kwargs):
    """
    A wrapper around click.group that allows for command shorthands as long as
    they are unambiguous. For example, `sws container list` can be shortened to
    `sws cont list` as `cont` uniquely identifies the `container` command.
    """

    class ClickAliasedGroup(click.Group):
        def get_command(self, ctx, cmd_name):
            rv = click.Group.get_command(self, ctx, cmd_name)
            if rv is not None:
                return rv

            def is_abbrev(x, y):
                # first char must match
                if x[0] != y[0]:
                    return False
                it = iter(y)
                return all(any(c == ch for c in it) for ch in x)

            matches = [x for x in self.list_commands(ctx) if is_abbrev(cmd_name, x)]

            if not matches:
                return None
            elif len(matches) == 1:
                return click.Group.get_command(self, ctx, matches[0])
            ctx.fail(f"'{cmd_name}' is ambiguous: {', '.join(sorted(matches))}")

        def resolve_command(self, ctx, args):
            # always return the full command name
            _, cmd, args = super().resolve_command(ctx, args)
            return cmd.name, cmd, args

        def group(self, *g_args, **g_kwargs):
            # nested groups inherit this group's behavior
            if "cls" not in g_kwargs:
                g_kwargs["cls"] = ClickAliasedGroup
            return super().group(*g_args, **g_kwargs)

        def invoke(self, ctx):
            try:
                return super().invoke(ctx)
            except StorageError as e:
                console.print(f"[red]{e.__class__.__name__}[/]: {e}")
                sys.exit(1)
            except ClientError as e:
                resp = getattr(e, "response", None)
                status = getattr(resp, "status_code", None)
                text = getattr(resp, "text", str(e))
                if status in (401, 403):
                    reason = "Unauthorized" if status == 401 else "Forbidden"
                    console.print(
                        f"\n[red]{status} {reason}[/]: {text}\n\n[yellow]Hint:[/yellow]"
                        " This may be caused by an invalid or expired auth token.\n"
                        " Obtain a new token and set it with [dim]export"
                        " SWIFTSTORE_AUTH_TOKEN=<token>[/dim].\n"
                    )
                elif status == 404:
                    console.print(f"[red]404 Not Found[/]: {text}")
                else:
                    console.print(f"[red]{status} Error[/]: {text}")
                sys.exit(1)
            except ServerError as e:
                resp = getattr(e, "response", None)
                status = getattr(resp, "status_code", None)
                text = getattr(resp, "text", str(e))
                console.print(f"[red]{status} Error[/]: {text}")
                sys.exit(1)
            except (click.ClickException, click.exceptions.Exit):
                raise
            except (ValueError, RuntimeError) as e:
                console.print(f"[red]Error[/]: {e}")
                logger.trace(traceback.format_exc())
                sys.exit(1)

    return click.group(*args, cls=ClickAliasedGroup, **kwargs)


def sizeof_fmt(num, suffix="B"):
    """
    Convert a quantity of bytes to a human readable format.
    ref: https://web.archive.org/web/20111010015624/http://blogmag.net/blog/read/38/Print_human_readable_file_size
    """
    for unit in ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi"):
        if abs(num) < 1024.0:
            return f"{num:3.1f}{unit}{suffix}"
        num /= 1024.0
    return f"{num:.1f}Yi{suffix}"


# Singleton API client for CLI process
_client_singleton: Optional[APIClient] = None


def get_client() -> APIClient:
    global _client_singleton
    if _client_singleton is None:
        _client_singleton = APIClient()
    return _client_singleton
