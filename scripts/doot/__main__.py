import sys

from doot.cli import main

sys.exit(main())
