import sys

from schack.app import main

sys.exit(main())
