import sys

from adhkar.cli import main

sys.exit(main())
