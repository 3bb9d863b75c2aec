import sys

from dockit.cli.main import main

sys.exit(main())
