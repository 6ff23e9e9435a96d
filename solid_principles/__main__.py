import sys

from solid_principles.cli.main import main

sys.exit(main())
