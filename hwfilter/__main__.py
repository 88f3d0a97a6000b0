import sys

from hwfilter.cli import main

sys.exit(main())
