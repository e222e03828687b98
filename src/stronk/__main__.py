import sys

from stronk.cli.app import main

sys.exit(main())
