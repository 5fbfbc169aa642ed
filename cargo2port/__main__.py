import sys

from cargo2port.main import main

sys.exit(main())
