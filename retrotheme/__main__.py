"""Entry point for `python -m retrotheme`."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    from retrotheme.app import configure_logger, create_services
    from retrotheme.errors import RetroThemeError, format_error_for_user
    from retrotheme.themes.loader import dump_tokens, load_theme_config

    parser = argparse.ArgumentParser(prog="retrotheme", description="Print retro theme tokens as YAML.")
    parser.add_argument("preset", nargs="?", help="classic, vintage or neon (default from settings)")
    parser.add_argument("--config", type=Path, help="YAML or JSON theme configuration file")
    parser.add_argument("--overrides-only", action="store_true", help="print only the retro overrides")
    args = parser.parse_args(argv)

    services = create_services()
    configure_logger(services.settings)
    try:
        if args.config is not None:
            theme = services.builder.build_from_config(load_theme_config(args.config))
        else:
            theme = services.builder.build_from_preset(args.preset or services.settings.default_preset)
    except RetroThemeError as exc:
        print(format_error_for_user(exc), file=sys.stderr)
        return 1

    tree = theme.get_overrides() if args.overrides_only else theme.get_tokens()
    sys.stdout.write(dump_tokens(tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())
