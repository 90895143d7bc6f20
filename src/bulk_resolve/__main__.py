import sys

from bulk_resolve.cli import main

sys.exit(main())
