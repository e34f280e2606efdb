"""Allow `python -m inventory_service --host ... --port ... --cache ...`."""

from inventory_service.cli import main

main()
