import sys

from subword_lattice.cli import main

sys.exit(main())
