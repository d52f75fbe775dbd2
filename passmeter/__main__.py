import sys

from passmeter.cli import main

sys.exit(main())
