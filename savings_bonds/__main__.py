import sys

from savings_bonds.cli import main

sys.exit(main())
