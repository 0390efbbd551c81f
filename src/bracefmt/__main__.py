## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# bracefmt — Python-inspired brace templates with a small format-specification language.
#

import os
import sys
import json
from dataclasses import dataclass

import click

from .errors import FormatError, FormatSyntaxError, FormatAddressError, FormatArityError
from .parser import format_template_context
from .formatting import write_without_ansi

from . import api


@dataclass(frozen=True)
class RunnerConfig:
    verbose: int
    plain: bool
    json: bool
    ignore: bool


_LITERALS = {'true': True, 'false': False, 'null': None}


def coerce_argument(text: str):
    """Turn command-line text into the value a template expects: numbers, booleans, or plain strings."""
    if text in _LITERALS: return _LITERALS[text]
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            continue
    return text

def parse_json_argument(text: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Argument `{text}` is not valid JSON: {exc.msg}.") from None


class FormatRunner:
    def __init__(self, config: RunnerConfig):
        self.verbose = config.verbose
        self.plain = config.plain
        self.json = config.json
        self.ignore = config.ignore

        if self.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        self.formatter = api._FORMATTER
        self.stats = {'placeholders': 0}
        self.failure = False

    def _maybe_fatal_error(self, message: str, detail: str, exc_type: str = None, context: str = '') -> None:
        header = detail if not exc_type else f"{detail} (Exception: \033[33m{exc_type}\033[0m)"
        print(f'\033[30;43m {message} \033[0m {header}\n{context}', file=sys.stderr)
        self.failure = True

    def _handle_exception(self, exc: FormatError, template: str) -> None:
        context = ''
        if exc.column is not None:
            context = format_template_context(template, exc.line, exc.column, exc.fmt_token or '')
        if isinstance(exc, FormatSyntaxError):
            title = "SYNTAX ERROR."
        elif isinstance(exc, (FormatAddressError, FormatArityError)):
            title = "ADDRESSING ERROR."
        else:
            title = "FORMAT ERROR."
        token = f" in `\033[1;97m{exc.fmt_token}\033[0m`" if exc.fmt_token else ""
        self._maybe_fatal_error(title, f"{exc}{token}", type(exc).__name__, context)

    def parse_arguments(self, raw: tuple[str, ...]) -> tuple:
        convert = parse_json_argument if self.json else coerce_argument
        return tuple(convert(a) for a in raw)

    def execute(self, template: str, raw_args: tuple[str, ...]) -> str | None:
        args = self.parse_arguments(raw_args)
        try:
            return self.formatter.run(template, args, verbosity=self.verbose, stats=self.stats)
        except FormatError as exc:
            self._handle_exception(exc, template)
            return None

    def finalize(self) -> int:
        if self.verbose:
            print(f"\033[90mplaceholders\t{self.stats['placeholders']}\033[0m", file=sys.stderr)
        return 1 if self.failure and not self.ignore else 0


@click.command(context_settings={'ignore_unknown_options': True})
@click.option('--verbose', '-v', default=0, count=True, help='Trace each placeholder as it is rendered.')
@click.option('--json', '-j', 'json_args', is_flag=True, help='Parse every argument as JSON, e.g. objects for keyed templates.')
@click.option('--ignore', '-i', is_flag=True, help='Report errors but exit successfully.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from the output (also set by NO_COLOR).')
@click.argument('template')
@click.argument('arguments', nargs=-1)
@click.pass_context
def cli(ctx: click.Context, verbose: int, json_args: bool, ignore: bool, plain: bool, template: str, arguments: tuple[str, ...]) -> None:
    """Substitute ARGUMENTS into the brace TEMPLATE and print the result; use `-` to read TEMPLATE from stdin."""
    plain = plain or bool(os.environ.get('NO_COLOR'))
    config = RunnerConfig(verbose=verbose, plain=plain, json=json_args, ignore=ignore)
    runner = FormatRunner(config)

    if template == '-':
        template = sys.stdin.read().rstrip('\n')
    if (output := runner.execute(template, arguments)) is not None:
        print(output)
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='bracefmt')


if __name__ == "__main__":
    main()
