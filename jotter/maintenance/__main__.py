"""Allow `python -m jotter.maintenance reset-password ...`."""

from jotter.maintenance.cli import main

raise SystemExit(main())
