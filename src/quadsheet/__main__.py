import sys

from quadsheet.cli import main

sys.exit(main())
