"""Run every principle demonstration in order: ``python -m solid_principles``."""

from __future__ import annotations

import logging

from . import dependency_inversion, interface_segregation, open_closed

DEMOS = (
    ("Dependency inversion", dependency_inversion.main),
    ("Interface segregation", interface_segregation.main),
    ("Open/closed", open_closed.main),
)


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    for title, demo in DEMOS:
        print(f"\n=== {title} ===\n")
        demo()


if __name__ == "__main__":
    main()
