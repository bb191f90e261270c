"""Console script entry point with production wiring.

Lives at package level, outside ``adapters``, so wiring the composition
root into the CLI does not make the adapters layer depend on composition.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``textbridge`` console script with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
