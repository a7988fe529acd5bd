import sys

from dailynotes.cli import main

sys.exit(main())
