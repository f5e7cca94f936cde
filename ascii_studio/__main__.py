import sys

from ascii_studio.cli import main

sys.exit(main())
