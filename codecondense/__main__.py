import sys

from codecondense.cli import main

sys.exit(main())
