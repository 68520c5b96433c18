import sys

from yank.cli import main

sys.exit(main())
