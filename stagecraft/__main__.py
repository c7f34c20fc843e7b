import sys

from stagecraft.app.main import main

sys.exit(main())
