import sys

from json_equivalence.cli import main

sys.exit(main())
