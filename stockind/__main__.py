import sys

from stockind.cli import main

sys.exit(main())
