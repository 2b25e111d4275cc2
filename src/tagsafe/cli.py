"""CLI entry point for tagsafe."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from .config_loader import ConfigLoader
from .detector import is_html
from .errors import ConfigError
from .log import enable_console_logging
from .pipeline import format_html


@dataclass
class TagsafeFlags:
    """Parsed command-line flags."""
    overrides: dict[str, Any] = field(default_factory=dict)
    config_path: Optional[str] = None
    no_config: bool = False
    check: bool = False
    print_config: bool = False
    verbose: bool = False
    help: bool = False


# Flags that take a value, mapped to the config key they set
VALUE_FLAGS = {
    "--tab-size": "tab_size",
    "--ignore-with": "ignore_with",
    "--tag-wrap-width": "tag_wrap_width",
}

LIST_FLAGS = {
    "--ignore": "ignore",
    "--trim": "trim",
}

BOOL_FLAGS = {
    "--strict": "strict",
    "--tag-wrap": "tag_wrap",
}

NUMERIC_KEYS = {"tab_size", "tag_wrap_width"}


def _parse_number(text: str) -> Union[int, float, str]:
    """Parse an int or float; leave anything else for validation to reject."""
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            pass
    return text


def extract_flags(args: list[str]) -> tuple[TagsafeFlags, list[str]]:
    """Extract tagsafe flags from args, return (flags, remaining_args)."""
    flags = TagsafeFlags()
    remaining = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in VALUE_FLAGS or arg in LIST_FLAGS or arg == "--config":
            if i + 1 >= len(args):
                remaining.append(arg)
                i += 1
                continue
            value = args[i + 1]
            if arg == "--config":
                flags.config_path = value
            elif arg in LIST_FLAGS:
                flags.overrides.setdefault(LIST_FLAGS[arg], []).append(value)
            else:
                key = VALUE_FLAGS[arg]
                flags.overrides[key] = _parse_number(value) if key in NUMERIC_KEYS else value
            i += 2
        elif arg in BOOL_FLAGS:
            flags.overrides[BOOL_FLAGS[arg]] = True
            i += 1
        elif arg == "--no-config":
            flags.no_config = True
            i += 1
        elif arg == "--check":
            flags.check = True
            i += 1
        elif arg == "--print-config":
            flags.print_config = True
            i += 1
        elif arg in ("--verbose", "-v"):
            flags.verbose = True
            i += 1
        elif arg in ("--help", "-h"):
            flags.help = True
            i += 1
        else:
            remaining.append(arg)
            i += 1

    return flags, remaining


def print_help() -> None:
    """Print tagsafe help."""
    print("tagsafe - Reformat HTML without touching attribute values or ignored elements")
    print()
    print("Usage: tagsafe [options] [FILE]")
    print()
    print("Reads FILE (or stdin) and writes the result to stdout.")
    print()
    print("Options:")
    print("  --tab-size <n>         Indentation width, 1 to 16 (default: 2)")
    print("  --ignore <tag>         Leave the content of <tag> untouched (can be repeated)")
    print("  --ignore-with <text>   Marker used to encode ignored content")
    print("  --trim <tag>           Strip whitespace inside <tag> boundaries (can be repeated)")
    print("  --strict               Enable strict formatting")
    print("  --tag-wrap             Wrap long opening tags")
    print("  --tag-wrap-width <n>   Column at which tags wrap (default: 80)")
    print("  --config <path>        Read options from a YAML file")
    print("  --no-config            Don't read ~/.config/tagsafe or .tagsafe config files")
    print("  --check                Exit 0 if the input contains HTML, 1 otherwise")
    print("  --print-config         Print the merged configuration as YAML and exit")
    print("  --verbose, -v          Log pipeline steps to stderr")
    print("  --help, -h             Show this help")
    print()
    print("Examples:")
    print("  tagsafe --trim p page.html")
    print("  tagsafe --ignore script --ignore pre < page.html")
    print("  tagsafe --config tagsafe.yaml --print-config")


def _read_input(remaining: list[str]) -> str:
    if remaining and remaining[0] != "-":
        return Path(remaining[0]).read_text(encoding="utf-8")
    return sys.stdin.read()


def run(args: Optional[list[str]] = None) -> int:
    """Run tagsafe with the given arguments. Returns exit code."""
    if args is None:
        args = sys.argv[1:]

    flags, remaining = extract_flags(args)

    if flags.help:
        print_help()
        return 0

    if flags.verbose:
        enable_console_logging(logging.DEBUG)

    if len(remaining) > 1:
        print(f"tagsafe: unexpected arguments: {' '.join(remaining[1:])}", file=sys.stderr)
        print("Try 'tagsafe --help' for more information.", file=sys.stderr)
        return 1

    search_locations = [] if flags.no_config else None
    loader = ConfigLoader(path=flags.config_path, search_locations=search_locations)

    try:
        config = loader.load(flags.overrides)
    except ConfigError as e:
        print(f"tagsafe: {e}", file=sys.stderr)
        return 2

    if flags.print_config:
        import yaml
        sys.stdout.write(yaml.safe_dump(config.to_dict(), sort_keys=False, allow_unicode=True))
        return 0

    try:
        html = _read_input(remaining)
    except OSError as e:
        print(f"tagsafe: {e}", file=sys.stderr)
        return 1

    if flags.check:
        return 0 if is_html(html) else 1

    sys.stdout.write(format_html(html, config))
    return 0


def main() -> None:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
