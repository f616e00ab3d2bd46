"""Text and JSON rendering of check results."""

import json
from dataclasses import dataclass

from constants import Constants
from versioning.models import CheckResult, CheckStatus
from versioning.sources import source_label

GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

NOT_FOUND = "not found"


@dataclass
class OutputOptions:
    """Rendering switches taken from the CLI."""
    verbose: bool = False
    quiet: bool = False
    print_only: bool = False
    color: bool = False


class _Painter:  # pylint: disable=too-few-public-methods
    """Wraps text in ANSI codes only when color is enabled."""

    def __init__(self, enabled: bool):
        self.enabled = enabled

    def __call__(self, text, code: str) -> str:
        if not self.enabled:
            return str(text)
        return f"{code}{text}{RESET}"


def format_print(result: CheckResult, options: OutputOptions) -> str:
    """Show only the detected raw values, without a verdict."""
    c = _Painter(options.color)
    label = f"{source_label(result.source)}:"
    types_label = f"{Constants.TYPES_PACKAGE}:"
    pad = max(len(label), len(types_label))
    node_raw = result.node_version.raw
    types_raw = result.types_node.raw
    return "\n".join([
        f"{label.ljust(pad)}  {c(node_raw, BOLD) if node_raw is not None else c(NOT_FOUND, DIM)}",
        f"{types_label.ljust(pad)}  {c(types_raw, BOLD) if types_raw is not None else c(NOT_FOUND, DIM)}",
    ])


def format_result(result: CheckResult, options: OutputOptions) -> str:
    """Render a result for the terminal.

    Args:
        result (CheckResult): Outcome of the check.
        options (OutputOptions): Rendering switches.

    Returns:
        str: Rendered text; empty in quiet mode when the check passed.
    """
    if options.print_only:
        return format_print(result, options)
    if options.quiet and result.status is CheckStatus.PASS:
        return ""

    c = _Painter(options.color)
    label = source_label(result.source)
    if result.status is CheckStatus.PASS:
        status = c("PASS", GREEN)
    elif result.status is CheckStatus.FAIL:
        status = c("FAIL", RED)
    else:
        status = c("WARN", YELLOW)

    lines = [f"{c(Constants.PROG_NAME, BOLD)}: {status}"]

    if result.status is CheckStatus.PASS and not options.verbose:
        return "\n".join(lines)

    if result.status is CheckStatus.FAIL:
        node_label = f"{label} major:"
        types_label = f"{Constants.TYPES_PACKAGE} major:"
        pad = max(len(node_label), len(types_label))
        lines.append(f"  {node_label.ljust(pad)}  {c(result.node_version.major, BOLD)}")
        lines.append(f"  {types_label.ljust(pad)}  {c(result.types_node.major, BOLD)}")
    elif result.status is CheckStatus.WARN:
        lines.append(f"  {result.message}")
    else:
        node_label = f"{label}:"
        types_label = f"{Constants.TYPES_PACKAGE}:"
        pad = max(len(node_label), len(types_label))
        lines.append(
            f"  {node_label.ljust(pad)} {result.node_version.raw} "
            f"{c(f'(major: {result.node_version.major})', DIM)}"
        )
        lines.append(
            f"  {types_label.ljust(pad)} {result.types_node.raw} "
            f"{c(f'(major: {result.types_node.major})', DIM)}"
        )

    if result.fix:
        lines.append("")
        lines.append(f"  Fix: {c(result.fix, BOLD)}")

    return "\n".join(lines)


def format_json(result: CheckResult) -> str:
    """Pretty-printed JSON form of a result."""
    return json.dumps(result.to_dict(), indent=2)


def result_from_json(text: str) -> CheckResult:
    """Parse the output of format_json back into a CheckResult."""
    return CheckResult.from_dict(json.loads(text))
