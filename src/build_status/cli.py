"""Click entry point."""

import sys

import click

from build_status import __version__, log
from build_status import wrap as wrap_mod
from build_status.config import SETTINGS, Config


def _setting_options(f):
    """Attach one option per setting, with its env var as the default."""
    for setting in reversed(SETTINGS):
        f = click.option(
            setting.flag,
            setting.name,
            envvar=setting.envvar,
            default=setting.default,
            show_envvar=True,
            help=setting.help,
        )(f)
    return f


@click.command(
    context_settings={
        "allow_interspersed_args": False,
        "help_option_names": ["-h", "--help"],
    }
)
@click.version_option(version=__version__, prog_name="build-status")
@_setting_options
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
def main(command, **values):
    """Run COMMAND and report its outcome as a GitHub commit status.

    Posts "pending" before COMMAND starts, then "success", "failure" or
    "error" once it finishes. Exits 0 only if COMMAND succeeded.
    """
    if not command:
        log.error("No command given")
        sys.exit(1)

    config = Config.from_values(**values)
    code = wrap_mod.wrap(config, list(command))
    sys.exit(code)


if __name__ == "__main__":
    main()
