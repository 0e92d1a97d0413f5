"""Run the launcher with ``python -m randbk``."""

from .main import main

main()
