from __future__ import annotations

import importlib
import logging
from typing import Optional

import click
from dotenv import load_dotenv

from config import get_settings_module

from .container import build_container
from .employees.bootstrap import seed_demo_employees
from .employees.controller import run


@click.command()
@click.option("--seed/--no-seed", default=None, help="Pre-populate demo employees (overrides SEED_DEMO_DATA).")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (overrides LOG_LEVEL).",
)
def main(seed: Optional[bool], log_level: Optional[str]) -> None:
    """In-memory employee payroll console."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=(log_level or getattr(settings, "LOG_LEVEL", "WARNING")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)
    logger.debug("settings=%s debug=%s", settings_module, bool(getattr(settings, "DEBUG", False)))

    container = build_container()

    if seed is None:
        seed = bool(getattr(settings, "SEED_DEMO_DATA", False))
    if seed:
        seed_demo_employees(container.employee_service)

    run(container)


if __name__ == "__main__":
    main()
