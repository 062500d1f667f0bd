import sys

from sqlviews.cli import main

sys.exit(main())
