import sys

from maxprofit.cli import main

sys.exit(main())
