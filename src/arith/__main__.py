import sys

from arith.cli import main

sys.exit(main())
