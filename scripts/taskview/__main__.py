import sys

from taskview.cli import main

sys.exit(main())
