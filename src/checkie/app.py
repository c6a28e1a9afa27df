"""Application entry point."""

from __future__ import annotations

import logging
import sys

from checkie.config import AppConfig


def main(argv: list[str] | None = None) -> int:
    """Launch Checkie in the configured front end."""
    config = AppConfig.from_args(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if config.interface == "gui":
        from checkie.ui.bootstrap import run_application

        return run_application(config)

    from checkie.ui.console import TextConsole

    return TextConsole.from_config(config).run()


if __name__ == "__main__":
    sys.exit(main())
