import sys

from pixai.api.cli import main

sys.exit(main())
