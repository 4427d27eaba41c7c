import sys

from lispulator.repl import main

sys.exit(main())
