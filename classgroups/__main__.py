import sys

from classgroups.cli import main

sys.exit(main())
