import sys

from bracketsim.cli import main

sys.exit(main())
